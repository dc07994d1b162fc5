"""Export Prekindle JSONP event feeds as a flat CSV table."""

__version__ = "0.1.0"
