"""printf-style token substitution.

Templates use ``%``-prefixed tokens in the usual ``[index$][flags][width][.precision]kind``
shape. Each kind maps to one rendering strategy:

* ``s`` text, ``d``/``i`` integer, ``f``/``e``/``E``/``g``/``G`` float,
  ``x``/``X``/``b`` integer in base 16/2, ``c`` character
* ``j``/``J`` JSON dump (width is used as the indent, reference cycles become ``"[Circular]"``)
* ``o`` compact object inspection, ``O`` pretty object inspection

``%%`` always renders a literal percent sign.
"""

from __future__ import annotations

import dataclasses
import json
import re
import sys
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel
from rich.pretty import pretty_repr

from nslog.core.exceptions import ParameterCountError, TokenFormatError

TOKEN_PATTERN = re.compile(
    r"%(?:(?P<index>[1-9]\d*)\$)?(?P<flags>[-+0]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?"
    r"(?P<kind>[%sdifeEgGxXbcjJoO])"
)

CIRCULAR = "[Circular]"
MAX_FALLBACK_DEPTH = 6

# Object-dump spellings written to files all collapse to the JSON token.
FILE_KIND_MAP = {"O": "j", "o": "j", "J": "j"}
# The console keeps object inspection for the same tokens.
CONSOLE_KIND_MAP = {"J": "O", "j": "o"}


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def _fields(value: Any) -> Mapping[str, Any] | None:
    """Field values of a model or dataclass instance, one level deep."""

    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    return None


def _break_cycles(value: Any, active: frozenset[int] = frozenset()) -> Any:
    fields = _fields(value)
    if fields is None and not isinstance(value, (Mapping, list, tuple)):
        return value
    if id(value) in active:
        return CIRCULAR
    active = active | {id(value)}
    if fields is not None:
        value = fields
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, (str, int, float, bool)) or key is None else str(key): _break_cycles(item, active)
            for key, item in value.items()
        }
    return [_break_cycles(item, active) for item in value]


def to_json(value: Any, indent: int | None = None) -> str:
    """Serialise ``value`` to JSON, tolerating reference cycles and non-JSON types.

    Raises:
        RecursionError: ``value`` is nested deeper than the interpreter allows.
    """

    return json.dumps(_break_cycles(value), default=_json_default, indent=indent or None, ensure_ascii=False)


def shallow_repr(value: Any) -> str:
    """Single-line representation cut off at a fixed depth, safe for any nesting."""

    return pretty_repr(value, max_width=sys.maxsize, max_depth=MAX_FALLBACK_DEPTH)


def _pad(text: str, width: str | None, flags: str) -> str:
    if not width:
        return text
    size = int(width)
    return text.ljust(size) if "-" in flags else text.rjust(size)


def _printf(spec: str, converter: Callable[[Any], Any]) -> Callable[[Any, re.Match[str]], str]:
    def render(value: Any, match: re.Match[str]) -> str:
        return spec_for(match, spec) % converter(value)

    return render


def spec_for(match: re.Match[str], kind: str) -> str:
    precision = match.group("precision")
    return "%" + match.group("flags") + (match.group("width") or "") + (f".{precision}" if precision else "") + kind


def _render_text(value: Any, match: re.Match[str]) -> str:
    return spec_for(match, "s") % (value,)


def _render_char(value: Any, match: re.Match[str]) -> str:
    char = chr(int(value)) if not isinstance(value, str) else value[:1]
    return _pad(char, match.group("width"), match.group("flags"))


def _render_binary(value: Any, match: re.Match[str]) -> str:
    return _pad(format(int(value), "b"), match.group("width"), match.group("flags"))


def _render_json(value: Any, match: re.Match[str]) -> str:
    width = match.group("width")
    return to_json(value, indent=int(width) if width else None)


def _render_inspect(value: Any, match: re.Match[str]) -> str:
    return _pad(repr(value), match.group("width"), match.group("flags"))


def _render_pretty(value: Any, match: re.Match[str]) -> str:
    return pretty_repr(value)


RENDERERS: dict[str, Callable[[Any, re.Match[str]], str]] = {
    "s": _render_text,
    "d": _printf("d", int),
    "i": _printf("i", int),
    "f": _printf("f", float),
    "e": _printf("e", float),
    "E": _printf("E", float),
    "g": _printf("g", float),
    "G": _printf("G", float),
    "x": _printf("x", int),
    "X": _printf("X", int),
    "b": _render_binary,
    "c": _render_char,
    "j": _render_json,
    "J": _render_json,
    "o": _render_inspect,
    "O": _render_pretty,
}


def rewrite_kinds(template: str, mapping: Mapping[str, str]) -> str:
    """Respell token kinds in ``template`` according to ``mapping``."""

    def _swap(match: re.Match[str]) -> str:
        kind = match.group("kind")
        if kind not in mapping:
            return match.group(0)
        token = match.group(0)
        return token[: -len(kind)] + mapping[kind]

    return TOKEN_PATTERN.sub(_swap, template)


def escape(text: str) -> str:
    """Escape ``%`` so ``text`` survives substitution verbatim."""

    return text.replace("%", "%%")


def count_arguments(template: str) -> int:
    """Number of arguments ``template`` consumes."""

    sequential = 0
    highest_index = 0
    for match in TOKEN_PATTERN.finditer(template):
        if match.group("kind") == "%":
            continue
        index = match.group("index")
        if index:
            highest_index = max(highest_index, int(index))
        else:
            sequential += 1
    return max(sequential, highest_index)


def substitute(template: str, args: Sequence[Any] = (), *, strict: bool = False) -> str:
    """Substitute ``args`` into the tokens of ``template``.

    In permissive mode (the default) a token without a matching argument is left
    as written, surplus arguments are ignored and a value that cannot be
    converted for its token is rendered with :func:`str` (or :func:`shallow_repr` when
    it is nested too deeply to render). In strict mode the same
    situations raise :class:`ParameterCountError` or :class:`TokenFormatError`.
    """

    if strict:
        expected = count_arguments(template)
        if expected != len(args):
            raise ParameterCountError(template, expected, len(args))

    cursor = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal cursor
        kind = match.group("kind")
        if kind == "%":
            return "%"

        index = match.group("index")
        if index:
            position = int(index) - 1
        else:
            position = cursor
            cursor += 1

        if position >= len(args):
            return match.group(0)

        value = args[position]
        try:
            return RENDERERS[kind](value, match)
        except RecursionError as exc:
            if strict:
                raise TokenFormatError(match.group(0), shallow_repr(value), "nested too deeply") from exc
            return shallow_repr(value)
        except (TypeError, ValueError, OverflowError) as exc:
            if strict:
                raise TokenFormatError(match.group(0), value, str(exc)) from exc
            return str(value)

    return TOKEN_PATTERN.sub(_replace, template)


__all__ = [
    "CIRCULAR",
    "CONSOLE_KIND_MAP",
    "FILE_KIND_MAP",
    "RENDERERS",
    "TOKEN_PATTERN",
    "count_arguments",
    "escape",
    "rewrite_kinds",
    "shallow_repr",
    "substitute",
    "to_json",
]
