import re
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from .errors import ConfigurationError


# --- Intervals ---
@dataclass(frozen=True)
class Interval:
    """
A bounded (or half-open) interval of comparable values.

``low`` and ``high`` may be None for an unbounded side. The upper bound is
inclusive unless ``exclude_end`` is set, so ``Interval(1, 100, True)``
holds 1 up to, but not including, 100.
    """
    low: Any = None
    high: Any = None
    exclude_end: bool = False

    def __contains__(self, value: Any) -> bool:
        try:
            if self.low is not None and value < self.low:
                return False
            if self.high is not None:
                return value < self.high if self.exclude_end else value <= self.high
            return True
        except TypeError:
            # Not orderable against the bounds, so not inside them.
            return False

    def __str__(self) -> str:
        low = "-inf" if self.low is None else repr(self.low)
        high = "inf" if self.high is None else repr(self.high)
        closing = ")" if self.exclude_end else "]"
        return f"[{low}, {high}{closing}"


def between(low: Any, high: Any, exclude_end: bool = False) -> Interval:
    return Interval(low, high, exclude_end)


# --- Expectation variants ---
@dataclass(frozen=True)
class TypeExpectation:
    type_: type


@dataclass(frozen=True)
class CapabilityExpectation:
    name: str


@dataclass(frozen=True)
class PredicateExpectation:
    function: Callable[[Any], Any]


@dataclass(frozen=True)
class PatternExpectation:
    pattern: re.Pattern


@dataclass(frozen=True)
class RangeExpectation:
    interval: Interval


@dataclass(frozen=True)
class BooleanLiteralExpectation:
    value: Optional[bool]


@dataclass(frozen=True)
class AnyOfExpectation:
    options: Tuple["Expectation", ...]


Expectation = Union[
    TypeExpectation,
    CapabilityExpectation,
    PredicateExpectation,
    PatternExpectation,
    RangeExpectation,
    BooleanLiteralExpectation,
    AnyOfExpectation,
]

EXPECTATION_TYPES = typing.get_args(Expectation)


def any_of(*declared: Any) -> AnyOfExpectation:
    return AnyOfExpectation(tuple(expectation_from(value) for value in declared))


def expectation_from(declared: Any) -> Expectation:
    """
Coerces a declared value into one of the Expectation variants.

Classes become type checks, strings capability checks, compiled patterns
pattern checks, ``range``/``Interval`` objects range checks, True/False/None
truthiness checks and lists or tuples alternatives. Any other callable is
used as a predicate. Everything else raises ConfigurationError.
    """
    if isinstance(declared, EXPECTATION_TYPES):
        return declared
    if declared is None or isinstance(declared, bool):
        return BooleanLiteralExpectation(declared)
    if typing.get_origin(declared) is not None:
        raise ConfigurationError(
            f"Invalid signature definition: parametrised type {declared!r} is not supported, "
            f"use a predicate instead"
        )
    if isinstance(declared, type):
        return TypeExpectation(declared)
    if isinstance(declared, str):
        return CapabilityExpectation(declared)
    if isinstance(declared, re.Pattern):
        return PatternExpectation(declared)
    if isinstance(declared, Interval):
        return RangeExpectation(declared)
    if isinstance(declared, range):
        if declared.step != 1:
            raise ConfigurationError(
                f"Invalid signature definition: {declared!r} must have a step of 1"
            )
        return RangeExpectation(Interval(declared.start, declared.stop, exclude_end=True))
    if isinstance(declared, (list, tuple)):
        return AnyOfExpectation(tuple(expectation_from(value) for value in declared))
    if callable(declared):
        return PredicateExpectation(declared)
    raise ConfigurationError(f"Invalid signature definition: Unknown behavior {declared!r}")
