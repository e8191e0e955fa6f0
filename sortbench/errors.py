class InvalidArgumentError(ValueError):
    """Raised when a call receives a malformed or out-of-range argument."""


class InvalidStateError(RuntimeError):
    """Raised when a well-formed call is made at the wrong point of a state machine."""
