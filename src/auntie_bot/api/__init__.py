"""HTTP surface for the summary page."""

from .app import create_api

__all__ = ["create_api"]
