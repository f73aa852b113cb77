"""Command-line interfaces and other presentation layer components."""
