"""Inventory Record value object."""

from dataclasses import dataclass, replace
from typing import Sequence

FIELD_COUNT = 4


@dataclass(frozen=True)  # Value objects are immutable
class Record:
    """Represents one inventory entry, either a single input row or several rows merged into one."""

    name: str
    code: str
    quantity: int  # Python int: sums cannot overflow
    expiration: str  # ISO yyyy-mm-dd

    @property
    def grouping_key(self) -> tuple[str, str, str]:
        """Fields that identify duplicate entries."""
        return (self.name, self.code, self.expiration)

    def merged_with(self, other: "Record") -> "Record":
        """Returns a new Record carrying the combined quantity of both entries."""
        if other.grouping_key != self.grouping_key:
            raise ValueError(f"Cannot merge records with different keys: {self.grouping_key} != {other.grouping_key}")
        return replace(self, quantity=self.quantity + other.quantity)

    def as_row(self) -> tuple[str, str, int, str]:
        return (self.name, self.code, self.quantity, self.expiration)

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Record":
        """
        Builds a Record from raw text fields (name, code, quantity, expiration).

        Raises:
            ValueError: on a wrong field count or a quantity that is not a base-10 integer.
        """
        if len(fields) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} fields, got {len(fields)}")
        name, code, quantity_text, expiration = (f.strip() for f in fields)
        try:
            quantity = int(quantity_text, 10)
        except ValueError as e:
            raise ValueError(f"Quantity '{quantity_text}' is not an integer") from e
        return cls(name=name, code=code, quantity=quantity, expiration=expiration)
