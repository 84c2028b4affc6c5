"""
Common utility functions for all components.

This module provides utilities organized into the following categories:
- System: Platform-specific configuration
- Domain: Clustering-specific helpers (k bounds, cluster colors)
- CLI/UI: Text formatting and logging
"""

import sys
import io
import os
from typing import Optional

import pandas as pd
from colorama import Fore, Style

from kmeans_viz.config import (
    CLUSTER_COLORS,
    K_MAX,
    K_MIN,
    UNASSIGNED_CLUSTER,
)

# ============================================================================
# SYSTEM UTILITIES
# ============================================================================

def configure_windows_stdio() -> None:
    """
    Configure Windows stdio encoding for UTF-8 support.

    Only applies to interactive CLI runs, not during pytest.

    Note:
        - Only runs on Windows (win32 platform)
        - Skips configuration during pytest runs
        - Only configures if stdout/stderr have buffer attribute
    """
    if sys.platform != "win32":
        return
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return
    if not hasattr(sys.stdout, "buffer") or isinstance(sys.stdout, io.TextIOWrapper):
        return
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8", errors="replace")


# ============================================================================
# DOMAIN-SPECIFIC UTILITIES (Clustering)
# ============================================================================

def clamp_k(value: Optional[int], low: int = K_MIN, high: int = K_MAX) -> int:
    """
    Clamps a requested cluster count into the range offered to users.

    Args:
        value: Requested k (None or non-numeric input falls back to `low`)
        low: Smallest allowed k (default: K_MIN)
        high: Largest allowed k (default: K_MAX)

    Returns:
        k limited to [low, high]
    """
    try:
        k = int(value)
    except (TypeError, ValueError):
        return low
    return min(high, max(low, k))


_COLOR_MAP = {
    "blue": Fore.BLUE,
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
}


def cluster_color(cluster_index: int) -> str:
    """
    Returns the colorama Fore color used to draw a cluster.

    Unassigned points (cluster_index == -1) are drawn in white.
    """
    if cluster_index == UNASSIGNED_CLUSTER or cluster_index < 0:
        return Fore.WHITE
    name = CLUSTER_COLORS[cluster_index % len(CLUSTER_COLORS)]
    return _COLOR_MAP.get(name, Fore.WHITE)


def cluster_label(cluster_index: int) -> str:
    """Human-facing cluster name (1-based), e.g. 'Cluster 1'."""
    if cluster_index == UNASSIGNED_CLUSTER or cluster_index < 0:
        return "Unassigned"
    return f"Cluster {cluster_index + 1}"


# ============================================================================
# CLI/UI UTILITIES
# ============================================================================

# --- Text Formatting ---

def color_text(text: str, color: str = Fore.WHITE, style: str = Style.NORMAL) -> str:
    """
    Applies color and style to text using colorama.

    Args:
        text: Text to format
        color: Colorama Fore color (default: Fore.WHITE)
        style: Colorama Style (default: Style.NORMAL)

    Returns:
        Formatted text string with color and style codes
    """
    return f"{style}{color}{text}{Style.RESET_ALL}"


def format_value(value: Optional[float], precision: int = 2) -> str:
    """
    Formats a coordinate or statistic for display.

    Args:
        value: Numeric value to format
        precision: Number of decimals (default: 2)

    Returns:
        Formatted string, or "N/A" if the value is missing
    """
    if value is None or pd.isna(value):
        return "N/A"
    return f"{value:.{precision}f}"


# --- Logging Functions ---
# Organized by severity level and purpose

# Standard severity levels
def log_info(message: str) -> None:
    """Print informational message with blue color."""
    print(color_text(message, Fore.BLUE))


def log_success(message: str) -> None:
    """Print success message with green color."""
    print(color_text(message, Fore.GREEN))


def log_error(message: str) -> None:
    """Print error message with red color and bright style."""
    print(color_text(message, Fore.RED, Style.BRIGHT))


def log_warn(message: str) -> None:
    """Print warning message with yellow color."""
    print(color_text(message, Fore.YELLOW))


# Domain-specific logging
def log_data(message: str) -> None:
    """Print data-related message with cyan color."""
    print(color_text(message, Fore.CYAN))


def log_progress(message: str) -> None:
    """Print progress update message with yellow color."""
    print(color_text(message, Fore.YELLOW))
