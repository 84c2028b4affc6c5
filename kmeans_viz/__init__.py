"""
K-Means customer clustering toolkit.
Step-by-step Lloyd's algorithm over synthetic rental-store customers.
"""

from . import config

__all__ = ["config"]
