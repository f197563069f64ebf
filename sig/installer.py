import inspect
from functools import wraps
from typing import Any, Callable, Optional, Tuple

from .errors import ConfigurationError
from .layer import get_layer, get_or_create_layer, target_name
from .reconciler import check_arguments, check_result
from .signature import Signature
from .visibility import Visibility


_MISSING = object()


def _parameter_names(function: Callable, receiver: bool) -> Tuple[Optional[str], ...]:
    """
Names of the parameters that fill positional slots, in slot order.

Positional-only parameters keep their slot but get no name, since they
cannot be passed by keyword.
    """
    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        return ()
    if receiver:
        parameters = parameters[1:]
    names = []
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
            names.append(None)
        elif parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD:
            names.append(parameter.name)
        else:
            break
    return tuple(names)


def build_checker(function: Callable, signature: Signature, receiver: bool = False) -> Callable:
    """
Wraps ``function`` so every call is checked against ``signature``.

Arguments are reconciled before the call, the result is checked after
it. With ``receiver`` set the first argument (``self`` or ``cls``) is
passed through unchecked. Exceptions raised by ``function`` propagate
untouched and skip the result check.
    """
    parameter_names = _parameter_names(function, receiver)

    if receiver:
        @wraps(function)
        def checked(receiver_, *args, **kwargs):
            check_arguments(signature, args, kwargs, parameter_names)
            result = function(receiver_, *args, **kwargs)
            check_result(signature.result, result)
            return result
    else:
        @wraps(function)
        def checked(*args, **kwargs):
            check_arguments(signature, args, kwargs, parameter_names)
            result = function(*args, **kwargs)
            check_result(signature.result, result)
            return result

    checked.__sig_signature__ = signature
    return checked


def _owner_name(target: Any) -> Optional[str]:
    """Name private attributes are mangled with; modules do not mangle."""
    if isinstance(target, type):
        return target.__name__
    if inspect.ismodule(target):
        return None
    return type(target).__name__


def _lookup(target: Any, attribute: str) -> Any:
    if isinstance(target, type):
        return inspect.getattr_static(target, attribute, _MISSING)
    return getattr(target, attribute, _MISSING)


def _resolve_attribute(target: Any, method_name: str, visibility: Visibility, owner_name: Optional[str]) -> str:
    """
Attribute name ``method_name`` lives under on ``target``.

A private method inherited from a base class is mangled with the base
class's name, so the classes of the MRO are tried in order.
    """
    attribute = visibility.attribute_name(method_name, owner_name)
    if visibility is not Visibility.PRIVATE or inspect.ismodule(target):
        return attribute
    if _lookup(target, attribute) is not _MISSING:
        return attribute
    owner = target if isinstance(target, type) else type(target)
    for base in owner.__mro__:
        candidate = visibility.attribute_name(method_name, base.__name__)
        if _lookup(target, candidate) is not _MISSING:
            return candidate
    return attribute


def _wrap(target: Any, original: Any, signature: Signature, attribute: str) -> Any:
    if isinstance(target, type):
        if isinstance(original, staticmethod):
            return staticmethod(build_checker(original.__func__, signature))
        if isinstance(original, classmethod):
            return classmethod(build_checker(original.__func__, signature, receiver=True))
        if inspect.isroutine(original):
            return build_checker(original, signature, receiver=True)
    elif callable(original):
        return build_checker(original, signature)
    raise ConfigurationError(
        f"Attribute {attribute!r} of {target_name(target)} is not a method: {original!r}"
    )


def _mark(wrapper: Any, visibility: Visibility) -> None:
    function = getattr(wrapper, "__func__", wrapper)
    function.__sig_visibility__ = visibility


def install(target: Any, signature: Signature, method_name: str) -> str:
    """
Installs a checking wrapper for ``method_name`` on ``target``.

``target`` is a class or any object with a ``__dict__`` (a module or a
single instance). The method must already exist; its visibility is kept
and all wrappers of a target live in its one InterceptionLayer.
Installing again for the same name replaces the previous wrapper.
    """
    if not isinstance(target, type) and not hasattr(target, "__dict__"):
        raise ConfigurationError(f"Cannot define signatures on {target!r}: it has no __dict__")

    owner_name = _owner_name(target)
    visibility = Visibility.of(method_name, owner_name)
    attribute = _resolve_attribute(target, method_name, visibility, owner_name)

    current = _lookup(target, attribute)
    if current is _MISSING:
        raise ConfigurationError(f"No method with name {method_name!r} for object {target!r}")
    layer = get_layer(target)
    original = layer.original_for(attribute, current) if layer is not None else current
    wrapper = _wrap(target, original, signature, attribute)

    layer = get_or_create_layer(target)
    with layer.lock:
        latest = layer.original_for(attribute, _lookup(target, attribute))
        if latest is not original:
            original, wrapper = latest, _wrap(target, latest, signature, attribute)
        _mark(wrapper, visibility)
        setattr(target, attribute, wrapper)
        layer.record(attribute, original, wrapper, visibility)

    return method_name


def define(target: Any, expected_arguments: Any, expected_result: Any, method_name: str) -> str:
    """
Declares a signature for an existing method of ``target``.

    define(Calculator, [numbers.Number, numbers.Number], numbers.Number, "sum")

Unknown expectation values and unknown methods raise ConfigurationError
and leave ``target`` untouched.
    """
    signature = Signature.declare(expected_arguments, expected_result)
    return install(target, signature, method_name)
