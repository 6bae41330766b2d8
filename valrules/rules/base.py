from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from ..result import Invalid, _Skip
from ..utils import ValidationUtils


RuleResult = Union[Invalid, _Skip, None]
CheckFn = Callable[[Any, ValidationUtils], RuleResult]


@dataclass(frozen=True, eq=False)
class Rule:
    """A named check with the parameters it was built from.

    Calling the rule returns None when the value passes, an `Invalid`
    otherwise (or `SKIP` for conditional requirement rules).
    """

    name: str
    check: CheckFn = field(repr=False)
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __call__(self, value: Any, ctx: ValidationUtils | None = None) -> RuleResult:
        return self.check(value, ctx if ctx is not None else ValidationUtils())


def rule(name: str) -> Callable[[CheckFn], Rule]:
    """Turn a parameterless check function into a Rule."""

    def wrap(fn: CheckFn) -> Rule:
        return Rule(name=name, check=fn)

    return wrap
