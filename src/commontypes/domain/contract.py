"""ValueObject — the capability contract shared by every value type.

Every value type exposes:

- ``is_valid(value)``: pure predicate, never raises, False for the wrong
  kind or shape of input.
- ``str(instance)``: the canonical string form.
- ``serialize()``: the JSON-ready form (canonical string or int).

Subclasses are also usable as pydantic field types: validation accepts
the raw scalar (or an existing instance), and both ``model_dump()`` and
``model_dump_json()`` emit ``serialize()``. Value types are dataclasses,
which pydantic would otherwise dump as field dicts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from commontypes.domain.errors import InvalidValue


class ValueObject(ABC):
    """Abstract base for immutable, self-validating value types."""

    # Raw scalar types accepted by ``is_valid`` and pydantic validation.
    raw_types: ClassVar[tuple[type, ...]] = (str,)

    @classmethod
    @abstractmethod
    def from_raw(cls, value: Any) -> Self:
        """Build an instance from its raw scalar, raising ``InvalidValue``."""

    @abstractmethod
    def serialize(self) -> Any:
        """Return the JSON-ready form of the value."""

    @abstractmethod
    def __str__(self) -> str: ...

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Whether *value* is an acceptable raw scalar for this type."""
        if isinstance(value, bool) and bool not in cls.raw_types:
            return False
        if not isinstance(value, cls.raw_types):
            return False
        try:
            cls.from_raw(value)
        except InvalidValue:
            return False
        return True

    @classmethod
    def _pydantic_validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        return cls.from_raw(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: instance.serialize(), when_used="always"
            ),
        )
