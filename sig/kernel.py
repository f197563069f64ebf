import logging
from functools import update_wrapper
from types import MethodType
from typing import Any, Callable, Optional

from .installer import build_checker, define, install
from .signature import Signature

logger = logging.getLogger(__name__)

__all__ = ["SignatureDeclaration", "define", "sig", "sig_self"]


class SignatureDeclaration:
    """
A function decorated with ``sig`` or ``sig_self``.

Inside a class body the declaration installs itself on the owning class
once the class exists, through the same InterceptionLayer ``define``
uses. Used on a module-level function it is called directly and checks
every call. Assigned to a class after creation it still binds like a
method, leaving the receiver unchecked.

``sig`` must be the outermost decorator of a method: a decorator above
it hides the declaration from the class and calls it with the receiver
as an ordinary argument.
    """
    def __init__(self, function: Any, signature: Signature, type_level: bool = False):
        self._function = function
        self.signature = signature
        self._type_level = type_level
        plain = getattr(function, "__func__", function)
        self._checked = build_checker(plain, signature)
        self._method_checked = build_checker(plain, signature, receiver=True)
        update_wrapper(self, plain)

    def __set_name__(self, owner: type, name: str) -> None:
        member = self._function
        if self._type_level and not isinstance(member, (classmethod, staticmethod)):
            member = classmethod(member)
        setattr(owner, name, member)
        install(owner, self.signature, name)
        logger.debug(f"Declared signature for {owner.__qualname__}.{name}")

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if isinstance(self._function, staticmethod):
            return self._checked
        if self._type_level or isinstance(self._function, classmethod):
            return MethodType(self._method_checked, owner if owner is not None else type(instance))
        if instance is None:
            return self
        return MethodType(self._method_checked, instance)

    def __call__(self, *args, **kwargs):
        return self._checked(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<SignatureDeclaration {self.__qualname__}>"


def sig(expected_arguments: Any = None, expected_result: Any = None) -> Callable[[Any], SignatureDeclaration]:
    """
Declares a signature for the decorated function or method.

    class Calculator:
        @sig([numbers.Number, numbers.Number], numbers.Number)
        def sum(self, a, b):
            return a + b

The receiver (``self``/``cls``) is never checked. Unknown expectation
values raise ConfigurationError at declaration time.
    """
    signature = Signature.declare(expected_arguments, expected_result)

    def decorator(function: Any) -> SignatureDeclaration:
        return SignatureDeclaration(function, signature)
    return decorator


def sig_self(expected_arguments: Any = None, expected_result: Any = None) -> Callable[[Any], SignatureDeclaration]:
    """
Like ``sig``, but always declares a type-level method: the decorated
function becomes a classmethod of the class it is defined in.
    """
    signature = Signature.declare(expected_arguments, expected_result)

    def decorator(function: Any) -> SignatureDeclaration:
        return SignatureDeclaration(function, signature, type_level=True)
    return decorator
