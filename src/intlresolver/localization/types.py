"""Type aliases and small value types for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from intlresolver.diagnostics import ContractViolationError, ErrorTemplate

__all__ = [
    "HookOutcome",
    "LocaleCode",
    "MessageDescriptor",
    "MessageKey",
    "Variables",
    "as_descriptor",
]

type MessageKey = str
"""Catalog key, flat ('greeting') or dotted ('menu.file.open')."""

type LocaleCode = str
"""Locale identifier as used in the catalog (e.g., 'en-US', 'zh-CN')."""

type Variables = Mapping[str, object]
"""Placeholder name to value, supplied per formatting call."""


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Key plus the text to show when the key does not resolve.

    Attributes:
        id: Message key
        default_message: Substituted when resolution yields an empty result
    """

    id: MessageKey
    default_message: str | None = None


@dataclass(frozen=True, slots=True)
class HookOutcome:
    """Result of invoking the pre-lookup hook.

    The orchestrator records the outcome and ignores it apart from logging
    failures; a failing hook never affects resolution.

    Attributes:
        ok: True if the hook returned normally
        error: Exception raised by the hook, if any
    """

    ok: bool
    error: Exception | None = None


def as_descriptor(value: MessageDescriptor | Mapping[str, object]) -> MessageDescriptor:
    """Accept a MessageDescriptor or a mapping with ``id`` and a default message.

    Mappings may spell the default as ``default_message`` or ``defaultMessage``.

    Raises:
        ContractViolationError: If no non-empty ``id`` is present

    Example:
        >>> as_descriptor({"id": "hello", "defaultMessage": "Hi"})
        MessageDescriptor(id='hello', default_message='Hi')
    """
    match value:
        case MessageDescriptor():
            descriptor = value
        case Mapping():
            default = value.get("default_message", value.get("defaultMessage"))
            descriptor = MessageDescriptor(
                id=value.get("id"),  # type: ignore[arg-type]
                default_message=None if default is None else str(default),
            )
        case _:
            raise ContractViolationError(ErrorTemplate.invalid_descriptor(type(value).__name__))
    if not isinstance(descriptor.id, str) or not descriptor.id:
        raise ContractViolationError(ErrorTemplate.invalid_descriptor(type(value).__name__))
    return descriptor
