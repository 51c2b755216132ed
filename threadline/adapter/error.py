"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class SourceError(AdapterError):
    """Comment source could not supply records."""

    pass
