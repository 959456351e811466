from __future__ import annotations

from ..core.constants import MAX_STUDENT_ID
from ..core.exceptions import ValidationError

_INVALID_ID = f"Invalid student ID: please enter a number between 0 and {MAX_STUDENT_ID}."


def parse_student_id(value: str) -> int:
    """Parse a typed student id into an unsigned 32-bit integer.

    An optional leading "+" is accepted ("+5" is 5).
    """
    text = (value or "").strip()
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()) or len(digits.lstrip("0")) > len(str(MAX_STUDENT_ID)):
        raise ValidationError(_INVALID_ID)
    student_id = int(digits)
    if student_id > MAX_STUDENT_ID:
        raise ValidationError(_INVALID_ID)
    return student_id


def parse_presence(answer: str) -> bool:
    return (answer or "").strip().lower() == "y"
