"""Domain errors."""


class RecordRetrievalError(Exception):
    """Raised when an upstream record cannot be retrieved."""


__all__ = ["RecordRetrievalError"]
