"""Diagnostic system for intlresolver errors and warnings.

Provides structured error diagnostics with codes, positions and hints,
plus the text templates used on the warning channel.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ContractViolationError,
    FormatError,
    IntlError,
    InvalidValueError,
    MessageSyntaxError,
    MissingValueError,
)
from .templates import ErrorTemplate, LocalizationWarning, WarningTemplate

__all__ = [
    "ContractViolationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormatError",
    "IntlError",
    "InvalidValueError",
    "LocalizationWarning",
    "MessageSyntaxError",
    "MissingValueError",
    "WarningTemplate",
]
