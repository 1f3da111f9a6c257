"""Contact validation rules and the field-keyed failure set."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

BLANK = "blank"
TAKEN = "taken"

MESSAGES = {
    BLANK: "can't be blank",
    TAKEN: "has already been taken",
}

REQUIRED_FIELDS = ("firstname", "lastname", "email")


@dataclass(frozen=True)
class ValidationFailure:
    """A single failing field with its reason tag."""

    field: str
    reason: str

    @property
    def message(self) -> str:
        return MESSAGES.get(self.reason, self.reason)


class ValidationErrors:
    """Complete set of validation failures, grouped by field.

    Falsy when empty, so ``if errors:`` reads as "validation failed".
    Indexing by field name returns that field's reason tags.
    """

    def __init__(self) -> None:
        self._failures: list[ValidationFailure] = []

    def add(self, field: str, reason: str) -> None:
        failure = ValidationFailure(field, reason)
        if failure not in self._failures:
            self._failures.append(failure)

    def __bool__(self) -> bool:
        return bool(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)

    def __getitem__(self, field: str) -> list[str]:
        return [f.reason for f in self._failures if f.field == field]

    def __repr__(self) -> str:
        return f"<ValidationErrors({self.to_dict()})>"

    @property
    def fields(self) -> set[str]:
        return {f.field for f in self._failures}

    def to_dict(self) -> dict[str, list[str]]:
        """Human-readable messages keyed by field name."""
        messages: dict[str, list[str]] = {}
        for failure in self._failures:
            messages.setdefault(failure.field, []).append(failure.message)
        return messages


def is_blank(value: Any) -> bool:
    """A value is blank when missing or whitespace only."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_presence(obj: Any, fields: tuple[str, ...] = REQUIRED_FIELDS) -> ValidationErrors:
    """Collect a ``blank`` failure for every required field without a value."""
    errors = ValidationErrors()
    for name in fields:
        if is_blank(getattr(obj, name, None)):
            errors.add(name, BLANK)
    return errors
