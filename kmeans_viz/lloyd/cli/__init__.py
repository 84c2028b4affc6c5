"""
Command-line interface components for k-means customer clustering.

This package provides argument parsing and formatted display functions.
"""

# Argument parsing
from kmeans_viz.lloyd.cli.argument_parser import parse_args

# Display utilities
from kmeans_viz.lloyd.cli.display import (
    display_configuration,
    display_iteration,
    display_final_status,
    display_cluster_statistics,
    display_points,
)

__all__ = [
    # Argument parsing
    'parse_args',
    # Display utilities
    'display_configuration',
    'display_iteration',
    'display_final_status',
    'display_cluster_statistics',
    'display_points',
]
