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
def matches(expectation: Any, value: Any) -> bool:
    """
Returns True if ``value`` satisfies ``expectation``.

Only the Expectation variants are understood; anything else is a
mistake in the declaration and raises ConfigurationError rather than
counting as a failed check.
    """
    raise ConfigurationError(f"Invalid signature definition: Unknown behavior {expectation!r}")


@matches.register
def _match_type(expectation: TypeExpectation, value: Any) -> bool:
    return isinstance(value, expectation.type_)


@matches.register
def _match_capability(expectation: CapabilityExpectation, value: Any) -> bool:
    return callable(getattr(value, expectation.name, None))


@matches.register
def _match_predicate(expectation: PredicateExpectation, value: Any) -> bool:
    return bool(expectation.function(value))


@matches.register
def _match_pattern(expectation: PatternExpectation, value: Any) -> bool:
    return expectation.pattern.search(str(value)) is not None


@matches.register
def _match_range(expectation: RangeExpectation, value: Any) -> bool:
    return value in expectation.interval


@matches.register
def _match_boolean(expectation: BooleanLiteralExpectation, value: Any) -> bool:
    if expectation.value is None:
        return True
    return bool(value) is expectation.value


@matches.register
def _match_any_of(expectation: AnyOfExpectation, value: Any) -> bool:
    return any(matches(option, value) for option in expectation.options)
