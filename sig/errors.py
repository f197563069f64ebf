from typing import List


class SigError(Exception):
    """Base class for every error raised by sig."""


class ConfigurationError(SigError, ValueError):
    """
Raised for programmer mistakes in a declaration: an unknown method or
target, or an expectation value sig does not know how to evaluate.
    """


class ValidationError(SigError):
    """
Base for failures of a declared contract at call time.

The individual diagnostic lines are kept on ``errors``; the message is
those lines joined by newlines.
    """
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class ArgumentTypeError(ValidationError, TypeError):
    """Raised before the wrapped body runs when arguments break the signature."""


class ResultTypeError(ValidationError, RuntimeError):
    """Raised after the wrapped body returns when its result breaks the signature."""
