# solrcriteria/query/fields.py
from dataclasses import dataclass

from solrcriteria.errors import InvalidField


@dataclass(frozen=True)
class Field:
    """Named target attribute of a criteria."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidField(f"Field name must be a non-empty string, got {self.name!r}")

    def __str__(self) -> str:
        return self.name


def as_field(target: "Field | str | None") -> Field:
    """Coerce a field name into a `Field`."""
    if target is None:
        raise InvalidField("Field for criteria must not be None")
    if isinstance(target, Field):
        return target
    if isinstance(target, str):
        return Field(target)
    raise InvalidField(f"Expected a field name or Field, got {type(target).__name__}")
