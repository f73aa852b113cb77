"""Command-line interface modules."""

from .generate_coordinates import main as generate_coordinates_main

__all__ = ["generate_coordinates_main"]
