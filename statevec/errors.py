"""Errors raised when a communication routine reports failure."""

from __future__ import annotations

SUCCESS = 0


class CommunicationError(RuntimeError):
    """Raised when a communication routine returns a failure code."""

    def __init__(self, routine: str, error_code: int) -> None:
        self.routine = routine
        self.error_code = error_code
        self.description = f"{routine}: failed with error code {error_code}"
        super().__init__(self.description)


def check_result(routine: str, result: int) -> int:
    """Return ``result`` if it signals success, otherwise raise :class:`CommunicationError`."""
    if result != SUCCESS:
        raise CommunicationError(routine, result)
    return result