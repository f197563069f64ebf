from functools import singledispatch
from typing import Any

from .errors import ConfigurationError
from .expectations import (
    AnyOfExpectation,
    BooleanLiteralExpectation,
    CapabilityExpectation,
    PatternExpectation,
    PredicateExpectation,
    RangeExpectation,
    TypeExpectation,
)


@singledispatch
def format_error(expectation: Any, value: Any) -> str:
    """
Describes why ``value`` failed ``expectation`` as one diagnostic line.

Only meaningful for a pair that has already failed ``matches``.
    """
    raise ConfigurationError(f"Invalid signature definition: Unknown behavior {expectation!r}")


@format_error.register
def _format_type(expectation: TypeExpectation, value: Any) -> str:
    return (
        f"Expected {value!r} to be a {expectation.type_.__name__}, "
        f"but is a {type(value).__name__}"
    )


@format_error.register
def _format_capability(expectation: CapabilityExpectation, value: Any) -> str:
    return f"Expected {value!r} to respond to {expectation.name!r}"


@format_error.register
def _format_predicate(expectation: PredicateExpectation, value: Any) -> str:
    name = getattr(expectation.function, "__qualname__", None) or repr(expectation.function)
    return f"Expected {value!r} to return a truthy value for predicate {name}"


@format_error.register
def _format_pattern(expectation: PatternExpectation, value: Any) -> str:
    return f"Expected stringified {value!r} to match {expectation.pattern.pattern!r}"


@format_error.register
def _format_range(expectation: RangeExpectation, value: Any) -> str:
    return f"Expected {value!r} to be included in {expectation.interval}"


@format_error.register
def _format_boolean(expectation: BooleanLiteralExpectation, value: Any) -> str:
    return f"Expected {value!r} to be {'truthy' if expectation.value else 'falsy'}"


@format_error.register
def _format_any_of(expectation: AnyOfExpectation, value: Any) -> str:
    return " OR ".join(format_error(option, value) for option in expectation.options)
