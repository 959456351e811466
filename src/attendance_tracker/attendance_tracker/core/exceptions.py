class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StudentNotFoundError(DomainError):
    """Raised when a student id is not present in the store."""

    def __init__(self, student_id: int):
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class PersistenceError(Exception):
    """Raised when the store cannot be written to or read from disk."""


class StoreFormatError(PersistenceError):
    """Raised when a data file is valid JSON but not a valid store document."""
