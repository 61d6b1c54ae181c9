"""Presentation layer: test tooling integration."""
