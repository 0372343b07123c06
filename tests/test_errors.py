import pytest

from gbaemu.errors import (
    DebuggerError,
    GBAError,
    InvalidArgument,
    InvalidCommand,
    InvalidCommandFormat,
    ParsingError,
)


def test_message_is_kept():
    err = InvalidCommandFormat("step [count]")
    assert err.message == "step [count]"
    assert str(err) == "step [count]"


@pytest.mark.parametrize(
    "cls", [ParsingError, InvalidCommand, InvalidArgument, InvalidCommandFormat]
)
def test_debugger_errors_caught_as_gba_error(cls):
    err = cls("boom")
    assert err.message == "boom"
    with pytest.raises(GBAError) as info:
        raise err
    assert info.value is err


def test_debugger_error_catches_specific_kind():
    with pytest.raises(DebuggerError) as info:
        raise InvalidCommand("frobnicate")
    assert info.value == InvalidCommand("frobnicate")


def test_equality_depends_on_type_and_message():
    assert InvalidArgument("x") == InvalidArgument("x")
    assert not (InvalidArgument("x") == InvalidArgument("y"))
    assert not (InvalidArgument("x") == InvalidCommand("x"))


def test_hash_matches_equality():
    assert len({ParsingError("a"), ParsingError("a"), ParsingError("b")}) == 2


def test_repr_names_class():
    assert repr(InvalidCommand("q")) == "InvalidCommand('q')"