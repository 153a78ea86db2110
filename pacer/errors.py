"""Canonical pacer error types.

Standard error codes:
- Invalid text has no error type: parsers return None and the field counts as absent
- TOO_MANY_FIELDS: All three of distance, time and pace/speed were entered
- INSUFFICIENT_DATA: Only one of the three fields was entered
- EMPTY_NAME: Pace set name is blank after trimming
- NOTHING_TO_SAVE: No total time has been computed
- STORAGE_FAILURE: Reading or writing the key-value store failed
"""

DISCIPLINE_LABELS: dict[str, str] = {
    "swim": "Swim",
    "bike": "Bike",
    "run": "Run",
}


class PacerError(RuntimeError):
    """Base error for pacer operations.

    Attributes:
        code: Error code (e.g., "TOO_MANY_FIELDS", "STORAGE_FAILURE")
        message: Human-readable message
    """

    code = "PACER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TooManyFieldsError(PacerError):
    """Raised when distance, time and pace/speed are all filled in."""

    code = "TOO_MANY_FIELDS"

    def __init__(self, discipline: str):
        self.discipline = discipline
        label = DISCIPLINE_LABELS.get(discipline, discipline)
        super().__init__(f"{label}: enter exactly two of distance, time and pace/speed, not all three.")


class InsufficientDataError(PacerError):
    """Raised when only one of the three fields is filled in."""

    code = "INSUFFICIENT_DATA"

    def __init__(self, discipline: str):
        self.discipline = discipline
        label = DISCIPLINE_LABELS.get(discipline, discipline)
        super().__init__(f"{label}: enter a second value to calculate the third.")


class EmptyNameError(PacerError):
    code = "EMPTY_NAME"

    def __init__(self):
        super().__init__("Please enter a name for the pace set.")


class NothingToSaveError(PacerError):
    code = "NOTHING_TO_SAVE"

    def __init__(self):
        super().__init__("Calculate a total time before saving.")


class StorageFailureError(PacerError):
    """Raised when the key-value store cannot be read or written.

    Attributes:
        operation: "read" or "write"
    """

    code = "STORAGE_FAILURE"

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Storage {operation} failed: {detail}")
