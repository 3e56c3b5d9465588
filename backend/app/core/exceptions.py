class AwardInterpreterError(Exception):
    """Base exception for award interpretation failures."""


class ShiftInputError(AwardInterpreterError, ValueError):
    """Raised when a shift cannot be calculated from the supplied input.

    ``reason`` is one of ``missing_input``, ``malformed_date``,
    ``malformed_time`` or ``invalid_shift_window``.
    """

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message
