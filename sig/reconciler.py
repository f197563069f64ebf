import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import ArgumentTypeError, ResultTypeError
from .expectations import Expectation
from .formatting import format_error
from .predicates import matches
from .signature import Signature, split_keyword_expectations

logger = logging.getLogger(__name__)


def _failure(label: str, expectation: Optional[Expectation], value: Any) -> Optional[str]:
    if expectation is not None and not matches(expectation, value):
        return f"- {label}: {format_error(expectation, value)}"
    return None


def _positional_label(index: int, parameter_names: Sequence[Optional[str]]) -> str:
    if index < len(parameter_names) and parameter_names[index]:
        return f"Argument {parameter_names[index]!r}"
    return f"Argument #{index}"


def reconcile(
        expected_positional: Sequence[Any],
        expected_keyword: Optional[Mapping[str, Expectation]],
        arguments: Sequence[Any],
        keyword_arguments: Mapping[str, Any],
        parameter_names: Sequence[Optional[str]] = ()
) -> List[str]:
    """
Pairs the declared expectations with the arguments of one call and
returns a diagnostic line for every slot that fails.

Positional slots are matched by index. A declared slot with no argument
is checked against None; arguments past the declared slots are only
checked when they fill a parameter declared as a keyword expectation.
Keywords are matched by name, and a keyword without a declared
expectation is not checked.

``parameter_names`` lists the positional parameters of the wrapped
function, in order. A keyword naming one of them (and not declared as a
keyword expectation) fills that parameter's positional slot.

When keywords are passed but no keyword expectations were declared, the
remaining keywords are checked as one dict in the next free positional
slot.
    """
    if expected_keyword is None:
        expected_positional, expected_keyword = split_keyword_expectations(list(expected_positional))

    slots: Dict[int, Any] = dict(enumerate(arguments))
    remaining: Dict[str, Any] = {}
    for name, value in keyword_arguments.items():
        declared_as_keyword = expected_keyword is not None and name in expected_keyword
        if not declared_as_keyword and name in parameter_names:
            index = parameter_names.index(name)
            if index not in slots:
                slots[index] = value
                continue
        remaining[name] = value

    if expected_keyword is None and remaining:
        index = len(arguments)
        while index in slots:
            index += 1
        slots[index] = dict(remaining)
        remaining = {}

    errors: List[str] = []
    for index, expectation in enumerate(expected_positional):
        error = _failure(_positional_label(index, parameter_names), expectation, slots.get(index))
        if error:
            errors.append(error)

    if expected_keyword is not None:
        # Keyword-declared parameters may still be passed positionally.
        for index in range(len(expected_positional), len(arguments)):
            name = parameter_names[index] if index < len(parameter_names) else None
            if name in expected_keyword and name not in keyword_arguments:
                error = _failure(f"Argument {name!r}", expected_keyword[name], arguments[index])
                if error:
                    errors.append(error)

        for name, value in remaining.items():
            error = _failure(f"Argument {name!r}", expected_keyword.get(name), value)
            if error:
                errors.append(error)

    return errors


def check_arguments(
        signature: Signature,
        arguments: Sequence[Any],
        keyword_arguments: Mapping[str, Any],
        parameter_names: Sequence[Optional[str]] = ()
) -> None:
    """Raises ArgumentTypeError carrying every failing slot of the call."""
    errors = reconcile(
        signature.positional, signature.keyword, arguments, keyword_arguments, parameter_names
    )
    if errors:
        logger.debug(f"Arguments rejected with {len(errors)} error(s): {errors}")
        raise ArgumentTypeError(errors)


def check_result(expected_result: Optional[Expectation], result: Any) -> None:
    error = _failure("Result", expected_result, result)
    if error:
        logger.debug(f"Result rejected: {error}")
        raise ResultTypeError([error])
