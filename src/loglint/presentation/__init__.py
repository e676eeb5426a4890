"""Presentation layer: Python API and pytest plugin."""
