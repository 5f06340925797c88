"""Presentation layer: controllers and framework-agnostic HTTP values."""
