"""
Drop-in replacements for ``sig.kernel`` that check nothing.

Set ``SIG_DISABLE=1`` to have ``import sig`` export these instead, or
import them from here directly.
"""
from typing import Any, Callable


def sig(expected_arguments: Any = None, expected_result: Any = None) -> Callable[[Any], Any]:
    def decorator(function: Any) -> Any:
        return function
    return decorator


def sig_self(expected_arguments: Any = None, expected_result: Any = None) -> Callable[[Any], Any]:
    def decorator(function: Any) -> Any:
        if isinstance(function, (classmethod, staticmethod)):
            return function
        return classmethod(function)
    return decorator


def define(target: Any, expected_arguments: Any, expected_result: Any, method_name: str) -> str:
    return method_name
