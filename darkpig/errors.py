"""Errors raised by Dark Pig Git"""


class RepositoryAccessError(Exception):
    """A repository read failed: unreadable object, missing id, corrupt pack, or no repository at all."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        message = f"{operation} failed: {detail}" if detail else f"{operation} failed"
        super().__init__(message)
