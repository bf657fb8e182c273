"""
Structured error types for fmtref.

Provides a small hierarchy of typed errors with metadata for reporting a
failed formatting call: which token failed, where in the template it sat,
and which argument was involved.

Every formatting call either returns its full output or raises one of these
errors. There is no partial output contract, and no error carries state
from one call to the next.

Manifesto:
    - **Typed Error Hierarchy:** One error type per way a directive can fail
    - **Rich Context:** Errors carry the token, position and argument index
    - **Error Chaining:** Preserve the underlying exception as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                        FormatError                           │
        │             (category, context, cause)                       │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  InvalidDirective      ArgumentError        ConfigError      │
        │  (SYNTAX)              (ARGUMENT)           (CONFIG)         │
        │       │                    │                                 │
        │  UnsupportedPadding   ArgumentTypeMismatch                   │
        │  (PADDING)            MissingArgument                        │
        │                       UnrenderableArgument                   │
        └─────────────────────────────────────────────────────────────┘

Examples:
    Unknown syntax:

    >>> error = InvalidDirective("%q")
    >>> error.category
    <ErrorCategory.SYNTAX: 'SYNTAX'>
    >>> error.context.token
    '%q'

    Adding context:

    >>> error = ArgumentTypeMismatch("%d", "five")
    >>> error.with_context(position=4, argument_index=1)
    ArgumentTypeMismatch(...)
    >>> error.context.position
    4

Guardrails:
    ❌ DON'T: Raise ValueError/TypeError from the formatting layer
    ✅ DO: Raise the FormatError subclass that names the failure

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, fmtref

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Attributes:
        SYNTAX: Unrecognised or malformed directive token
        ARGUMENT: Argument missing or of the wrong type
        PADDING: Padding requested where the directive does not support it
        CONFIG: Invalid settings
        INTERNAL: Bugs, unexpected state
    """

    SYNTAX = "SYNTAX"
    ARGUMENT = "ARGUMENT"
    PADDING = "PADDING"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Only the fields that are set end up in ``to_dict()``.

    Attributes:
        token: Directive token that failed (``%05s``)
        template: Whole template the token came from
        position: Character offset of the token inside the template
        argument_index: Zero-based index of the offending argument
        metadata: Any other key/values
    """

    token: str | None = None
    template: str | None = None
    position: int | None = None
    argument_index: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result = {
            k: v
            for k, v in {
                "token": self.token,
                "template": self.template,
                "position": self.position,
                "argument_index": self.argument_index,
            }.items()
            if v is not None
        }
        result.update(self.metadata)
        return result


class FormatError(Exception):
    """
    Base class for all fmtref errors.

    Attributes:
        message: Human readable description
        category: ErrorCategory for classification
        context: ErrorContext with token/position metadata
        cause: Underlying exception, if any

    Examples:
        >>> error = FormatError("Bad template", category=ErrorCategory.SYNTAX)
        >>> error.to_dict()["category"]
        'SYNTAX'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> FormatError:
        """
        Add context to this error (fluent API).

        Usage:
            raise InvalidDirective("%q").with_context(
                template="a%qb",
                position=1,
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# DIRECTIVE ERRORS
# =============================================================================


class InvalidDirective(FormatError):
    """Unrecognised directive syntax, bad width or illegal flag combination."""

    default_category = ErrorCategory.SYNTAX

    def __init__(self, token: str, reason: str | None = None, **kwargs: Any):
        message = f"Invalid format directive {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, **kwargs)
        self.token = token
        self.reason = reason
        self.context.token = token


class UnsupportedPadding(InvalidDirective):
    """Zero padding requested for a directive that is not an integer."""

    default_category = ErrorCategory.PADDING

    def __init__(self, token: str, **kwargs: Any):
        super().__init__(
            token,
            "zero padding is only defined for integer directives",
            **kwargs,
        )


# =============================================================================
# ARGUMENT ERRORS
# =============================================================================


class ArgumentError(FormatError):
    """Base for errors caused by the supplied arguments."""

    default_category = ErrorCategory.ARGUMENT


class ArgumentTypeMismatch(ArgumentError):
    """Argument type does not match the directive's expected type."""

    def __init__(self, token: str, argument: Any, expected: str = "integer", **kwargs: Any):
        actual = type(argument).__name__
        super().__init__(
            f"Directive {token!r} expects {expected}, got {actual} ({argument!r})",
            **kwargs,
        )
        self.token = token
        self.argument = argument
        self.expected = expected
        self.context.token = token
        self.context.metadata.setdefault("expected", expected)
        self.context.metadata.setdefault("actual", actual)


class MissingArgument(ArgumentError):
    """Template needs more arguments than were supplied."""

    def __init__(self, token: str, argument_index: int, **kwargs: Any):
        super().__init__(
            f"Directive {token!r} needs argument #{argument_index + 1} but none was supplied",
            **kwargs,
        )
        self.token = token
        self.context.token = token
        self.context.argument_index = argument_index


class UnrenderableArgument(ArgumentError):
    """Argument passed type checking but the native conversion refused it."""

    def __init__(self, token: str, argument: Any, **kwargs: Any):
        actual = type(argument).__name__
        super().__init__(f"Directive {token!r} cannot render this {actual} argument", **kwargs)
        self.token = token
        self.argument = argument
        self.context.token = token
        self.context.metadata.setdefault("actual", actual)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(FormatError):
    """Invalid fmtref settings."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "FormatError",
    "InvalidDirective",
    "UnsupportedPadding",
    "ArgumentError",
    "ArgumentTypeMismatch",
    "MissingArgument",
    "UnrenderableArgument",
    "ConfigError",
]
