from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from .errors import ConfigurationError
from .expectations import Expectation, expectation_from


def split_keyword_expectations(expected: List[Any]) -> Tuple[List[Any], Optional[Mapping[str, Any]]]:
    """Splits a trailing mapping of keyword expectations off a positional list."""
    if expected and isinstance(expected[-1], Mapping):
        return list(expected[:-1]), expected[-1]
    return list(expected), None


@dataclass(frozen=True)
class Signature:
    """
The full contract of one wrapped method: positional expectations, an
optional mapping of keyword expectations and an optional result
expectation.
    """
    positional: Tuple[Expectation, ...] = ()
    keyword: Optional[Mapping[str, Expectation]] = None
    result: Optional[Expectation] = None

    @classmethod
    def declare(cls, expected_arguments: Any = None, expected_result: Any = None) -> "Signature":
        """
Builds a Signature from plain declaration values.

``expected_arguments`` is None, a mapping of keyword expectations, or a
list (or tuple) of positional expectations whose last element may be
such a mapping. Any other value stands for a single positional slot.
        """
        if expected_arguments is None:
            declared: List[Any] = []
        elif isinstance(expected_arguments, (list, tuple)):
            declared = list(expected_arguments)
        else:
            declared = [expected_arguments]

        positional, keyword = split_keyword_expectations(declared)

        keyword_expectations = None
        if keyword is not None:
            for name in keyword:
                if not isinstance(name, str):
                    raise ConfigurationError(
                        f"Invalid signature definition: keyword name {name!r} is not a string"
                    )
            keyword_expectations = MappingProxyType(
                {name: expectation_from(value) for name, value in keyword.items()}
            )

        return cls(
            positional=tuple(expectation_from(value) for value in positional),
            keyword=keyword_expectations,
            result=None if expected_result is None else expectation_from(expected_result),
        )
