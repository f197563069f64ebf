from .config import SigConfig, disabled_from_env, setup_logging
from .errors import (
    ArgumentTypeError,
    ConfigurationError,
    ResultTypeError,
    SigError,
    ValidationError,
)
from .expectations import Interval, any_of, between

if disabled_from_env():
    from .none import define, sig, sig_self
else:
    from .kernel import define, sig, sig_self

__version__ = "1.0.0"

__all__ = [
    "ArgumentTypeError",
    "ConfigurationError",
    "Interval",
    "ResultTypeError",
    "SigConfig",
    "SigError",
    "ValidationError",
    "any_of",
    "between",
    "define",
    "setup_logging",
    "sig",
    "sig_self",
]
