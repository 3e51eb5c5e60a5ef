"""statelens - composable lenses and traversals for immutable records."""

__version__ = "0.1.0"
