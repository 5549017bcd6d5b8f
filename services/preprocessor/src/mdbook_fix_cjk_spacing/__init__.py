"""mdBook preprocessor entry points for the CJK line-join filter."""

__version__ = "0.1.0"
