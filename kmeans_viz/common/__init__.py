"""Shared helpers: colored logging, formatting and platform setup."""
