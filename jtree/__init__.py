"""Parse, build, edit, print and minify JSON document trees."""

__version__ = "1.4.7"

__all__ = ["factory", "item", "minify", "parser", "printer"]