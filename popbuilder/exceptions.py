"""
Error types raised by the population stores, services and renderer.
"""


class PopBuilderError(Exception):
    """Base class for application errors."""


class StoreUnavailableError(PopBuilderError):
    """A population store could not be opened."""


class QueryError(PopBuilderError):
    """A population store query failed or returned an undecodable row."""


class RenderError(PopBuilderError):
    """A template could not be loaded or rendered."""
