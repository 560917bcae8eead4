from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .alphabets import DEFAULT_DIGITS, check_digits
from .keys import (
    INTEGER_ZERO_HEAD,
    generate_key_between,
    generate_n_keys_between,
    is_valid_order_key,
    smallest_integer,
    validate_order_key,
)


# === Domain objects used by the in-memory collection ===


@dataclass
class OrderedItem:
    id: str
    sort_key: str
    payload: Any = None
    version: int = 0


# === Keyspace ===


class Keyspace(BaseModel):
    """Order key operations bound to one validated digit alphabet."""

    model_config = ConfigDict(frozen=True)

    digits: str = Field(default=DEFAULT_DIGITS, min_length=2)

    @field_validator("digits")
    @classmethod
    def validate_digits(cls, value: str) -> str:
        return check_digits(value)

    @property
    def zero(self) -> str:
        return self.digits[0]

    @property
    def sentinel(self) -> str:
        return smallest_integer(self.digits)

    @property
    def first_key(self) -> str:
        return INTEGER_ZERO_HEAD + self.zero

    def key_between(self, a: Optional[str], b: Optional[str]) -> str:
        return generate_key_between(a, b, self.digits)

    def n_keys_between(self, a: Optional[str], b: Optional[str], n: int) -> List[str]:
        return generate_n_keys_between(a, b, n, self.digits)

    def validate_key(self, key: str) -> None:
        validate_order_key(key, self.digits)

    def is_valid(self, key: str) -> bool:
        return is_valid_order_key(key, self.digits)
