"""Statistics domain exceptions."""

from datetime import date

from kakeibo.domain.shared.exceptions import ErrorCode, ValidationError


class MalformedPeriodError(ValidationError):
    """Raised when a period would end before it starts.

    This is a programming error on the caller's side, never a recoverable
    runtime condition.
    """

    def __init__(self, start: date, end: date) -> None:
        super().__init__(
            message=f"Period start {start.isoformat()} is after end {end.isoformat()}",
            code=ErrorCode.INVALID_PERIOD,
            details={"start": start.isoformat(), "end": end.isoformat()},
        )


class InvalidTransactionTypeError(ValidationError):
    """Raised when a transaction type string is not income or expense."""

    def __init__(self, value: str, valid: list[str]) -> None:
        super().__init__(
            message=f"Unknown transaction type: {value}. Valid: {valid}",
            code=ErrorCode.INVALID_TRANSACTION_TYPE,
            details={"value": value, "valid": valid},
        )
