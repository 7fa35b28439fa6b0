"""Dictionary explanation documents: tokens, plain text and render requests."""

__version__ = "0.1.0"
