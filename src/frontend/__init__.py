"""Flask UI and JSON API over the prefix completion engine."""
from .web import app

__all__ = ["app"]
