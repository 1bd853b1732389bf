from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_SCHEME_PATTERN = re.compile(r"[A-Za-z0-9:/+.=_-]+")
_VALUE_PATTERN = re.compile(r"[!-z][ -z]*")


@dataclass(frozen=True)
class StandardId:
    """An identifier made of a scheme and a value, e.g. ``OG-Counterparty~BANK-A``.

    The string form is ``scheme~value`` and round-trips through `parse`.
    """

    scheme: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.scheme, str) or not _SCHEME_PATTERN.fullmatch(self.scheme):
            raise ValueError(f"Invalid StandardId scheme {self.scheme!r}")
        if not isinstance(self.value, str) or not _VALUE_PATTERN.fullmatch(self.value):
            raise ValueError(f"Invalid StandardId value {self.value!r}")

    @classmethod
    def of(cls, scheme: str, value: str) -> "StandardId":
        return cls(scheme=scheme, value=value)

    @classmethod
    def parse(cls, text: str) -> "StandardId":
        """Parse ``'scheme~value'``."""
        if not isinstance(text, str):
            raise TypeError(f"StandardId text must be a string. Got {type(text).__name__}.")
        scheme, sep, value = text.strip().partition("~")
        if not sep:
            raise ValueError(f"StandardId must be formatted 'scheme~value'. Got {text!r}.")
        return cls(scheme=scheme, value=value)

    def __str__(self) -> str:
        return f"{self.scheme}~{self.value}"


def to_standard_id(value: Any) -> StandardId:
    """Accept a `StandardId` or its ``scheme~value`` string form."""
    if isinstance(value, StandardId):
        return value
    if isinstance(value, str):
        return StandardId.parse(value)
    raise TypeError(
        "Identifier must be a StandardId or a 'scheme~value' string. "
        f"Got {type(value).__name__}."
    )
