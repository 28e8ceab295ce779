"""intlresolver exception hierarchy with structured diagnostics.

Two error classes exist by design of the resolution pipeline:

- Contract violations (ContractViolationError) are programmer errors and
  propagate to the caller.
- Formatting failures (FormatError and subclasses) are raised by the
  template formatter and caught by the orchestrator, which reports them
  through the warning channel and degrades to the raw template.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class IntlError(Exception):
    """Base exception for all intlresolver errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ContractViolationError(IntlError, ValueError):
    """Programmer error: missing key, missing required init option.

    Subclasses ValueError so callers validating arguments generically
    can catch it without importing intlresolver types.
    """


class FormatError(IntlError):
    """Template could not be formatted.

    Attributes:
        cause: Underlying exception, if the failure wrapped one
    """

    def __init__(self, message: str | Diagnostic, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class MessageSyntaxError(FormatError):
    """Malformed ICU MessageFormat template.

    Attributes:
        position: Character offset where parsing failed
    """

    def __init__(self, message: str | Diagnostic, *, position: int) -> None:
        super().__init__(message)
        self.position = position


class MissingValueError(FormatError):
    """Template references a variable that was not supplied."""


class InvalidValueError(FormatError):
    """Variable value is incompatible with its argument type.

    Example: a plural selector fed a non-numeric string.
    """
