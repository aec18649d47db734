"""
DomainError - Common base of every error raised by the core.
"""


class DomainError(Exception):
    """Base class for domain errors. Subclasses set status_hint."""

    status_hint: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
