"""Core domain models, validation and services for coordinate generation."""
