"""Recursive-descent parser for ICU MessageFormat templates.

Grammar (whitespace allowed wherever ICU allows Pattern_White_Space):

    message       := (literal | argument | '#')*
    argument      := '{' name [',' type [',' style-or-options]] '}'
    type          := number | date | time | plural | selectordinal | select
    plural-opts   := ['offset:' integer] (selector '{' message '}')+
    selector      := '=' number | keyword

Quoting follows ICU's "double optional" apostrophe mode: ``''`` is a
literal apostrophe; an apostrophe directly before ``{``, ``}``, ``<``,
``>`` (or ``#`` inside a plural sub-message) starts a quoted run that
ends at the next lone apostrophe. Any other apostrophe is literal.

``#`` is special only in the immediate sub-messages of a plural or
selectordinal argument. An unmatched ``}`` at the top level is literal
text. Tags such as ``<b>`` are not interpreted and stay literal text, so
markup embedded in templates passes through untouched.

Python 3.13+. Zero external dependencies.
"""

import functools
from decimal import Decimal, InvalidOperation

from intlresolver.constants import MAX_DEPTH, MAX_PATTERN_CACHE_SIZE
from intlresolver.diagnostics import ErrorTemplate, MessageSyntaxError
from intlresolver.enums import ArgumentType, PluralType

from .ast import (
    Argument,
    DateTimeArgument,
    Element,
    Literal,
    NumberArgument,
    Pattern,
    PluralArgument,
    Pound,
    SelectArgument,
)
from .cursor import Cursor, ParseResult

__all__ = ["parse_message", "parse_message_cached"]

_QUOTABLE = frozenset("{}<>")
_PLURAL_TYPES = (ArgumentType.PLURAL, ArgumentType.SELECTORDINAL)
_NAME_TERMINATORS = frozenset("{},")


def parse_message(source: str) -> Pattern:
    """Parse an ICU MessageFormat template.

    Args:
        source: Raw template, e.g. ``"{count, plural, one{# item} other{# items}}"``

    Returns:
        Parsed Pattern

    Raises:
        MessageSyntaxError: If the template is malformed

    Example:
        >>> parse_message("Hello, {name}!").elements
        (Literal(value='Hello, '), Argument(name='name'), Literal(value='!'))
    """
    result = _parse_pattern(Cursor(source, 0), depth=0, parent_type=None)
    return result.value


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def parse_message_cached(source: str) -> Pattern:
    """parse_message() with an LRU cache keyed by template text.

    Patterns are immutable, so sharing them across threads is safe.
    Syntax errors are not cached.
    """
    return parse_message(source)


def _parse_pattern(
    cursor: Cursor, *, depth: int, parent_type: ArgumentType | None
) -> ParseResult[Pattern]:
    """Parse elements until EOF (top level) or an unmatched ``}`` (nested)."""
    if depth > MAX_DEPTH:
        raise MessageSyntaxError(
            ErrorTemplate.nesting_depth_exceeded(MAX_DEPTH, cursor.pos), position=cursor.pos
        )

    elements: list[Element] = []
    text: list[str] = []
    in_plural = parent_type in _PLURAL_TYPES

    def flush() -> None:
        if text:
            elements.append(Literal("".join(text)))
            text.clear()

    while not cursor.is_eof:
        char = cursor.current
        if char == "}" and depth > 0:
            break
        if char == "{":
            flush()
            argument = _parse_argument(cursor, depth=depth)
            elements.append(argument.value)
            cursor = argument.cursor
        elif char == "#" and in_plural:
            flush()
            elements.append(Pound())
            cursor = cursor.advance()
        elif char == "'":
            quoted = _parse_apostrophe(cursor, in_plural=in_plural)
            text.append(quoted.value)
            cursor = quoted.cursor
        else:
            text.append(char)
            cursor = cursor.advance()

    flush()
    return ParseResult(Pattern(tuple(elements)), cursor)


def _parse_apostrophe(cursor: Cursor, *, in_plural: bool) -> ParseResult[str]:
    """Resolve ICU apostrophe quoting starting at a ``'``."""
    following = cursor.peek(1)
    if following == "'":
        return ParseResult("'", cursor.advance(2))
    if following is None or not (following in _QUOTABLE or (following == "#" and in_plural)):
        return ParseResult("'", cursor.advance())

    # Quoted run: everything up to the next lone apostrophe is literal.
    cursor = cursor.advance()
    chars: list[str] = []
    while not cursor.is_eof:
        char = cursor.current
        if char == "'":
            if cursor.peek(1) == "'":
                chars.append("'")
                cursor = cursor.advance(2)
                continue
            return ParseResult("".join(chars), cursor.advance())
        chars.append(char)
        cursor = cursor.advance()
    # Unterminated quote runs to the end of the template.
    return ParseResult("".join(chars), cursor)


def _parse_token(cursor: Cursor) -> ParseResult[str]:
    """Read a run of characters up to whitespace or ``{``, ``}``, ``,``."""
    start = cursor
    while not cursor.is_eof and not cursor.current.isspace() and cursor.current not in _NAME_TERMINATORS:
        cursor = cursor.advance()
    return ParseResult(start.slice_to(cursor.pos), cursor)


def _parse_argument(cursor: Cursor, *, depth: int) -> ParseResult[Element]:
    """Parse ``{name ...}`` starting at the opening brace."""
    open_pos = cursor.pos
    cursor = cursor.expect("{").skip_whitespace()

    name_result = _parse_token(cursor)
    name = name_result.value
    if not name:
        raise MessageSyntaxError(ErrorTemplate.empty_argument(open_pos), position=open_pos)
    cursor = name_result.cursor.skip_whitespace()

    if cursor.is_eof:
        raise MessageSyntaxError(
            ErrorTemplate.unexpected_eof(cursor.pos, "'}' or ','"), position=cursor.pos
        )
    if cursor.current == "}":
        return ParseResult(Argument(name), cursor.advance())

    cursor = cursor.expect(",", "'}' or ','").skip_whitespace()
    type_pos = cursor.pos
    type_result = _parse_token(cursor)
    try:
        arg_type = ArgumentType(type_result.value)
    except ValueError:
        raise MessageSyntaxError(
            ErrorTemplate.invalid_argument_type(type_result.value, type_pos), position=type_pos
        ) from None
    cursor = type_result.cursor.skip_whitespace()

    match arg_type:
        case ArgumentType.NUMBER | ArgumentType.DATE | ArgumentType.TIME:
            style_result = _parse_simple_style(cursor)
            style = style_result.value
            element: Element = (
                NumberArgument(name, style)
                if arg_type is ArgumentType.NUMBER
                else DateTimeArgument(name, arg_type, style)
            )
            return ParseResult(element, style_result.cursor)
        case ArgumentType.PLURAL | ArgumentType.SELECTORDINAL | ArgumentType.SELECT:
            cursor = cursor.expect(",", "',' before options").skip_whitespace()
            return _parse_options(cursor, name=name, arg_type=arg_type, depth=depth, start=open_pos)


def _parse_simple_style(cursor: Cursor) -> ParseResult[str | None]:
    """Parse the optional ``, style`` part of number/date/time arguments.

    The style runs to the matching ``}``; nested braces and quoted
    apostrophes inside it are kept verbatim.
    """
    if cursor.is_eof:
        raise MessageSyntaxError(ErrorTemplate.unexpected_eof(cursor.pos, "'}'"), position=cursor.pos)
    if cursor.current == "}":
        return ParseResult(None, cursor.advance())

    cursor = cursor.expect(",", "'}' or ','").skip_whitespace()
    start = cursor
    nesting = 0
    while True:
        if cursor.is_eof:
            raise MessageSyntaxError(
                ErrorTemplate.unexpected_eof(cursor.pos, "'}' closing the argument"),
                position=cursor.pos,
            )
        char = cursor.current
        if char == "'":
            # Keep quoted runs intact; Babel patterns use the same quoting.
            cursor = cursor.advance()
            while not cursor.is_eof and cursor.current != "'":
                cursor = cursor.advance()
            cursor = cursor.advance()
            continue
        if char == "{":
            nesting += 1
        elif char == "}":
            if nesting == 0:
                break
            nesting -= 1
        cursor = cursor.advance()

    style = start.slice_to(cursor.pos).strip()
    return ParseResult(style or None, cursor.advance())


def _parse_offset(cursor: Cursor) -> ParseResult[int]:
    """Parse ``offset:N`` with the cursor at ``offset``."""
    offset_pos = cursor.pos
    cursor = cursor.advance(len("offset"))
    if cursor.is_eof or cursor.current != ":":
        raise MessageSyntaxError(ErrorTemplate.invalid_offset(offset_pos), position=offset_pos)
    cursor = cursor.advance().skip_whitespace()
    number_result = _parse_token(cursor)
    try:
        offset = int(number_result.value)
    except ValueError:
        raise MessageSyntaxError(
            ErrorTemplate.invalid_offset(offset_pos), position=offset_pos
        ) from None
    return ParseResult(offset, number_result.cursor)


def _parse_options(
    cursor: Cursor, *, name: str, arg_type: ArgumentType, depth: int, start: int
) -> ParseResult[Element]:
    """Parse selector/sub-message pairs up to the argument's closing brace."""
    options: dict[str, Pattern] = {}
    offset = 0
    is_plural = arg_type in _PLURAL_TYPES

    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            raise MessageSyntaxError(
                ErrorTemplate.unexpected_eof(cursor.pos, "selector or '}'"), position=cursor.pos
            )
        if cursor.current == "}":
            cursor = cursor.advance()
            break

        selector_pos = cursor.pos
        if is_plural and not options and cursor.source.startswith("offset:", cursor.pos):
            offset_result = _parse_offset(cursor)
            offset = offset_result.value
            cursor = offset_result.cursor
            continue

        selector_result = _parse_token(cursor)
        selector = selector_result.value
        if not selector:
            raise MessageSyntaxError(
                ErrorTemplate.expected_selector(selector_pos), position=selector_pos
            )
        if is_plural and selector.startswith("="):
            try:
                Decimal(selector[1:])
            except InvalidOperation:
                raise MessageSyntaxError(
                    ErrorTemplate.unexpected_character(
                        selector, selector_pos, "'=' followed by a number"
                    ),
                    position=selector_pos,
                ) from None
        if selector in options:
            raise MessageSyntaxError(
                ErrorTemplate.duplicate_selector(selector, selector_pos), position=selector_pos
            )

        cursor = selector_result.cursor.skip_whitespace().expect("{", "'{' opening a sub-message")
        sub_result = _parse_pattern(cursor, depth=depth + 1, parent_type=arg_type)
        cursor = sub_result.cursor.expect("}", "'}' closing the sub-message")
        options[selector] = sub_result.value

    if not options:
        raise MessageSyntaxError(ErrorTemplate.expected_selector(start), position=start)
    if "other" not in options:
        raise MessageSyntaxError(ErrorTemplate.missing_other_clause(name, start), position=start)

    if arg_type is ArgumentType.SELECT:
        return ParseResult(SelectArgument(name, options), cursor)
    plural_type = PluralType.ORDINAL if arg_type is ArgumentType.SELECTORDINAL else PluralType.CARDINAL
    return ParseResult(PluralArgument(name, options, offset, plural_type), cursor)
