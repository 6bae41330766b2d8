"""Validity results returned by rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Invalid:
    """Why a value failed a rule.

    `params` always carries the candidate under "value" plus the rule's own
    parameters. `implicit` stops the remaining rules of the same field.
    """

    rule: str
    params: dict[str, Any] = field(default_factory=dict)
    implicit: bool = False


class _Skip:
    """Marker for an absent value whose requirement condition does not hold."""

    _instance: _Skip | None = None

    def __new__(cls) -> _Skip:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __bool__(self) -> bool:
        return True


SKIP = _Skip()


def invalid(rule: str, params: dict[str, Any] | None = None, implicit: bool = False) -> Invalid:
    return Invalid(rule=rule, params=dict(params or {}), implicit=implicit)
