"""Interactive prompt that splits command lines into shell tokens."""

__version__ = "0.1.0"