"""ctxcopy - copy file, project and cursor context to the clipboard."""

__version__ = "0.1.0"
