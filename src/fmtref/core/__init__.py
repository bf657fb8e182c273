"""
fmtref.core - errors, results, logging and settings shared by all modules.
"""

from fmtref.core.errors import (
    ArgumentError,
    ArgumentTypeMismatch,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    FormatError,
    InvalidDirective,
    MissingArgument,
    UnrenderableArgument,
    UnsupportedPadding,
)
from fmtref.core.result import Err, Ok, Result, try_result

__all__ = [
    "ArgumentError",
    "ArgumentTypeMismatch",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "FormatError",
    "InvalidDirective",
    "MissingArgument",
    "UnrenderableArgument",
    "UnsupportedPadding",
    "Err",
    "Ok",
    "Result",
    "try_result",
]
