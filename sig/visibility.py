from enum import Enum
from typing import Optional


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _mangle_prefix(owner_name: str) -> Optional[str]:
    stripped = owner_name.lstrip("_")
    return f"_{stripped}__" if stripped else None


class Visibility(Enum):
    """
How a method is meant to be reached, read off its name.

``__name`` is private (classes store it mangled as ``_Owner__name``),
``_name`` is protected and everything else, dunders included, is public.
    """
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def of(cls, name: str, owner_name: Optional[str] = None) -> "Visibility":
        if _is_dunder(name):
            return cls.PUBLIC
        prefix = _mangle_prefix(owner_name) if owner_name else None
        if name.startswith("__") or (prefix and name.startswith(prefix)):
            return cls.PRIVATE
        if name.startswith("_"):
            return cls.PROTECTED
        return cls.PUBLIC

    def attribute_name(self, name: str, owner_name: Optional[str] = None) -> str:
        """Returns the attribute a method of this visibility is stored under."""
        if self is not Visibility.PRIVATE or not owner_name:
            return name
        prefix = _mangle_prefix(owner_name)
        if prefix is None or name.startswith(prefix):
            return name
        return f"{prefix[:-2]}{name}"
