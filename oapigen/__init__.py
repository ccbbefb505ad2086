"""Models, settings and type descriptions for generating code from OpenAPI 3 documents."""

__version__ = "0.1.0"