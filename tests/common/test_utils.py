"""
Tests for common utils module.
"""
import io
from contextlib import redirect_stdout

import numpy as np
import pytest
from colorama import Fore, Style

from kmeans_viz.common.utils import (
    clamp_k,
    cluster_color,
    cluster_label,
    color_text,
    format_value,
    log_error,
    log_info,
    log_success,
)


@pytest.mark.parametrize(
    "value,expected",
    [(1, 2), (2, 2), (3, 3), (5, 5), (9, 5), (-4, 2), ("4", 4), ("abc", 2), (None, 2)],
)
def test_clamp_k(value, expected):
    """Test k is clamped into [2, 5]."""
    assert clamp_k(value) == expected


def test_clamp_k_custom_bounds():
    """Test custom clamp bounds."""
    assert clamp_k(10, low=1, high=8) == 8


def test_cluster_color_palette():
    """Test cluster colors follow the palette and unassigned is white."""
    assert cluster_color(0) == Fore.BLUE
    assert cluster_color(1) == Fore.RED
    assert cluster_color(4) == Fore.MAGENTA
    assert cluster_color(-1) == Fore.WHITE


def test_cluster_label():
    """Test labels are 1-based."""
    assert cluster_label(0) == "Cluster 1"
    assert cluster_label(4) == "Cluster 5"
    assert cluster_label(-1) == "Unassigned"


def test_color_text_wraps_codes():
    """Test color_text adds style, color and reset codes."""
    text = color_text("hello", Fore.GREEN, Style.BRIGHT)

    assert text.startswith(Style.BRIGHT + Fore.GREEN)
    assert text.endswith(Style.RESET_ALL)
    assert "hello" in text


def test_format_value():
    """Test value formatting and missing values."""
    assert format_value(3.14159) == "3.14"
    assert format_value(3.14159, 4) == "3.1416"
    assert format_value(None) == "N/A"
    assert format_value(np.nan) == "N/A"


def test_log_functions_print_message():
    """Test log helpers print the message."""
    buf = io.StringIO()
    with redirect_stdout(buf):
        log_info("info message")
        log_success("success message")
        log_error("error message")

    output = buf.getvalue()
    assert "info message" in output
    assert "success message" in output
    assert "error message" in output
