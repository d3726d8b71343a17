"""Command-line app for placeholder image generation."""
