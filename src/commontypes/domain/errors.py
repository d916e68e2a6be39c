"""The single error kind raised by value-type factories.

INVARIANT: raised at construction/parse time only. Once a value object
exists it is valid for its whole lifetime.
"""

from __future__ import annotations

from typing import Any


class InvalidValue(ValueError):
    """A raw value does not satisfy a value type's format or range.

    Attributes:
        field: Name of the offending component (``"year"``, ``"hours"``,
            ``"value"`` for whole-string parses, ...).
        value: The rejected input.
        expected: Accepted range or format, in human-readable form.
    """

    def __init__(self, field: str, value: Any, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f'Invalid "{field}" value ({value!r}), it must be {expected}')

    def to_detail(self) -> dict[str, Any]:
        """Structured payload for service errors and JSON output."""
        return {"field": self.field, "value": str(self.value), "expected": self.expected}
