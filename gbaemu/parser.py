"""Parser for the debugger's command language.

An input line is one of:

* an assignment ``lvalue = rvalue``,
* a command ``name arg0 arg1 ...``,
* nothing but whitespace.

Values are unsigned 32-bit numbers (decimal or ``0x`` hex with up to eight
digits), ``true``/``false``, identifiers, and dereferences such as
``*(u16*)0x1234`` or ``*r0``. Text left over after a complete expression is
ignored.
"""

import enum
import string
from dataclasses import dataclass

from .errors import ParsingError

_MULTISPACE = frozenset(" \t\r\n")
_HEX_DIGITS = frozenset(string.hexdigits)
_DEC_DIGITS = frozenset(string.digits)
_U32_MAX = 0xFFFF_FFFF
_MAX_HEX_DIGITS = 8


class DerefType(enum.Enum):
    """Width of a memory dereference."""

    WORD = 32
    HALFWORD = 16
    BYTE = 8


@dataclass(frozen=True)
class Num:
    """An unsigned 32-bit number."""

    value: int


@dataclass(frozen=True)
class Boolean:
    """A ``true`` or ``false`` literal."""

    value: bool


@dataclass(frozen=True)
class Identifier:
    """A name: a command, a register or any other word."""

    name: str


@dataclass(frozen=True)
class Deref:
    """Memory read at the address given by target."""

    target: "Num | Identifier"
    deref_type: DerefType = DerefType.WORD


Value = Num | Boolean | Identifier | Deref


@dataclass(frozen=True)
class Command:
    """A command name followed by its arguments."""

    name: Identifier
    args: tuple = ()


@dataclass(frozen=True)
class Assignment:
    """``lvalue = rvalue``."""

    lvalue: Value
    rvalue: Value


@dataclass(frozen=True)
class Empty:
    """A line holding only whitespace."""


Expr = Command | Assignment | Empty


class _NoMatch(Exception):
    """A branch did not match; the caller may try another."""

    def __init__(self, pos: int, expected: str) -> None:
        super().__init__(expected)
        self.pos = pos
        self.expected = expected


_DEREF_TYPES = (
    ("u32*", DerefType.WORD),
    ("u16*", DerefType.HALFWORD),
    ("u8*", DerefType.BYTE),
)


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text

    def failure(self, err: _NoMatch, context: str) -> ParsingError:
        found = self.text[err.pos:err.pos + 10]
        found_desc = repr(found) if found else "end of input"
        return ParsingError(
            f"in {context}: expected {err.expected} at column {err.pos + 1}, "
            f"found {found_desc}\n{self.text}\n{' ' * err.pos}^"
        )

    def ws0(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and text[pos] in _MULTISPACE:
            pos += 1
        return pos

    def ws1(self, pos: int) -> int:
        end = self.ws0(pos)
        if end == pos:
            raise _NoMatch(pos, "whitespace")
        return end

    def char(self, pos: int, c: str) -> int:
        if self.text.startswith(c, pos):
            return pos + 1
        raise _NoMatch(pos, repr(c))

    def tag(self, pos: int, t: str) -> int:
        if self.text.startswith(t, pos):
            return pos + len(t)
        raise _NoMatch(pos, repr(t))

    def hex_number(self, pos: int) -> tuple[int, int]:
        start = self.tag(pos, "0x")
        end = start
        text = self.text
        while (
            end < len(text)
            and end - start < _MAX_HEX_DIGITS
            and text[end] in _HEX_DIGITS
        ):
            end += 1
        if end == start:
            raise _NoMatch(start, "hex digits")
        return int(text[start:end], 16), end

    def dec_number(self, pos: int) -> tuple[int, int]:
        text = self.text
        end = pos
        while end < len(text) and text[end] in _DEC_DIGITS:
            end += 1
        if end == pos:
            raise _NoMatch(pos, "digits")
        value = int(text[pos:end])
        if value > _U32_MAX:
            raise _NoMatch(pos, "a 32-bit number")
        return value, end

    def num(self, pos: int) -> tuple[Num, int]:
        try:
            value, end = self.hex_number(pos)
        except _NoMatch:
            value, end = self.dec_number(pos)
        return Num(value), end

    def boolean(self, pos: int) -> tuple[Boolean, int]:
        for word, value in (("true", True), ("false", False)):
            if self.text.startswith(word, pos):
                return Boolean(value), pos + len(word)
        raise _NoMatch(pos, "a boolean")

    def identifier(self, pos: int) -> tuple[Identifier, int]:
        text = self.text
        end = pos
        while end < len(text) and (text[end].isalnum() or text[end] in "_-"):
            end += 1
        if end == pos:
            raise _NoMatch(pos, "an identifier")
        return Identifier(text[pos:end]), end

    def deref_type(self, pos: int) -> tuple[DerefType, int]:
        p = self.char(pos, "(")
        for word, kind in _DEREF_TYPES:
            if self.text.startswith(word, p):
                return kind, self.char(p + len(word), ")")
        raise _NoMatch(p, "a pointer type")

    def deref(self, pos: int) -> tuple[Deref, int]:
        p = self.char(pos, "*")
        try:
            kind, p = self.deref_type(p)
        except _NoMatch:
            kind = DerefType.WORD
        try:
            try:
                target, p = self.num(p)
            except _NoMatch:
                target, p = self.identifier(p)
        except _NoMatch:
            raise self.failure(_NoMatch(p, "a number or identifier"), "deref") from None
        return Deref(target, kind), p

    def value(self, pos: int) -> tuple[Value, int]:
        for branch in (self.boolean, self.deref, self.num, self.identifier):
            try:
                return branch(pos)
            except _NoMatch:
                continue
        raise _NoMatch(pos, "an argument")

    def command(self, pos: int) -> tuple[Command, int]:
        name, p = self.identifier(pos)
        p = self.ws0(p)
        args = []
        try:
            arg, p = self.value(p)
        except _NoMatch:
            return Command(name, ()), p
        args.append(arg)
        while True:
            try:
                q = self.ws1(p)
                arg, q = self.value(q)
            except _NoMatch:
                break
            args.append(arg)
            p = q
        return Command(name, tuple(args)), p

    def assignment(self, pos: int) -> tuple[Assignment, int]:
        lvalue, p = self.value(pos)
        p = self.char(self.ws0(p), "=")
        p = self.ws0(p)
        try:
            rvalue, p = self.value(p)
        except _NoMatch as err:
            raise self.failure(err, "assignment") from None
        return Assignment(lvalue, rvalue), p

    def expr(self) -> Expr:
        p = self.ws0(0)
        for branch in (self.assignment, self.command):
            try:
                result, _ = branch(p)
                return result
            except _NoMatch:
                continue
        return Empty()


def parse_deref(text: str) -> tuple[str, Deref]:
    """Parse a dereference at the start of text; return (rest, value).

    Raises ParsingError if text does not start with a valid dereference.
    """
    parser = _Parser(text)
    try:
        value, end = parser.deref(0)
    except _NoMatch as err:
        raise parser.failure(err, "deref") from None
    return text[end:], value


def parse_expr(text: str) -> Expr:
    """Parse one debugger input line. Raises ParsingError on malformed input."""
    return _Parser(text).expr()