"""Exception hierarchy for the emulator and its debugger."""


class GBAError(Exception):
    """Base class for every error raised by the emulator."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class DebuggerError(GBAError):
    """Base class for errors raised by the interactive debugger."""


class ParsingError(DebuggerError):
    """A debugger expression could not be parsed."""


class InvalidCommand(DebuggerError):
    """The debugger does not know the requested command."""


class InvalidArgument(DebuggerError):
    """A command argument has the wrong kind or value."""


class InvalidCommandFormat(DebuggerError):
    """A command was given the wrong number of arguments; the message is its usage."""