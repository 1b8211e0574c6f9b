"""Todo API: categories and soft-deletable todos over HTTP."""

__version__ = "0.1.0"
