"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages carried by
intlresolver exceptions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Contract violations (programmer errors)
        2000-2999: Formatting errors (value/argument mismatches)
        3000-3999: Template syntax errors
    """

    # Contract violations (1000-1999)
    KEY_REQUIRED = 1001
    OPTION_REQUIRED = 1002
    INVALID_DESCRIPTOR = 1003
    INVALID_CATALOG = 1004

    # Formatting errors (2000-2999)
    VALUE_NOT_PROVIDED = 2001
    INVALID_VALUE = 2002
    FORMATTING_FAILED = 2003
    UNKNOWN_FORMAT = 2004

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_CHARACTER = 3002
    EMPTY_ARGUMENT = 3003
    INVALID_ARGUMENT_TYPE = 3004
    MISSING_OTHER_CLAUSE = 3005
    DUPLICATE_SELECTOR = 3006
    INVALID_OFFSET = 3007
    EXPECTED_SELECTOR = 3008
    NESTING_DEPTH_EXCEEDED = 3009


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Character offset in the template (syntax errors only)
        hint: Suggestion for fixing the error
        argument_name: Template argument that caused the error (format errors)
        expected_type: Expected value type (format errors)
        received_type: Actual value type received (format errors)
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[VALUE_NOT_PROVIDED]: Value for argument 'name' not provided
              = argument: name
              = help: Pass 'name' in the variables mapping

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> offset {self.position}")
        if self.argument_name is not None:
            lines.append(f"  = argument: {self.argument_name}")
        if self.expected_type is not None:
            lines.append(f"  = expected: {self.expected_type}")
        if self.received_type is not None:
            lines.append(f"  = received: {self.received_type}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
