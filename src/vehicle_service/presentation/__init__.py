"""Presentation layer: components and command-line interface."""
