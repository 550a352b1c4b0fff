"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class RealtimeError(AdapterError):
    """Real-time transport error."""

    pass
