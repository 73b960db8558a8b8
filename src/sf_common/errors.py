"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration
  2xxx: Clock
  3xxx: Request / id format
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Configuration ---

class ConfigurationError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, detail, 500)


# --- 2xxx: Clock ---

class ClockMovedBackwardsError(AppError):
    """Wall clock returned a timestamp earlier than the last generated id."""

    def __init__(self, offset_ms: int) -> None:
        self.offset_ms = offset_ms
        super().__init__(
            2001,
            f"Clock moved backwards. Refusing to generate id for {offset_ms} milliseconds",
            503,
        )


# --- 3xxx: Request / id format ---

class InvalidSnowflakeError(AppError):
    def __init__(self, value: int) -> None:
        super().__init__(3001, f"Not a valid snowflake id: {value}", 422)


class InvalidBatchSizeError(AppError):
    def __init__(self, count: int, limit: int | None = None) -> None:
        if limit is None:
            message = f"Batch size must be at least 1, got {count}"
        else:
            message = f"Batch size must be between 1 and {limit}, got {count}"
        super().__init__(3002, message, 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
