"""Exceptions raised by services and translated to HTTP errors by routers."""


class ActionInFlightError(RuntimeError):
    """An AI-backed action was invoked again before the previous call resolved."""


class InvalidViewError(RuntimeError):
    """The requested action is not available in the current view."""
