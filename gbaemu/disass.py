"""Linear disassembly of a byte buffer with a pluggable instruction decoder."""

from typing import Protocol

from .errors import GBAError


class DecodeError(GBAError):
    """The bytes at an address do not form a defined instruction."""


class UnexpectedEof(DecodeError):
    """Too few bytes remain to decode an instruction."""


class InstructionDecoder(Protocol):
    """Decodes fixed-size instructions.

    decode returns an object with a ``raw`` integer whose str() is its text,
    and raises UnexpectedEof or DecodeError.
    """

    word_size: int

    def decode(self, data, addr: int): ...


class Disassembler:
    """Iterates over (offset after the instruction, listing line) pairs."""

    def __init__(self, decoder: InstructionDecoder, base: int, data) -> None:
        self.decoder = decoder
        self.base = base
        self.word_size = decoder.word_size
        self._data = memoryview(data)
        self._pos = 0

    def __iter__(self) -> "Disassembler":
        return self

    def __next__(self) -> tuple[int, str]:
        addr = self.base + self._pos
        try:
            insn = self.decoder.decode(self._data[self._pos:], addr)
        except UnexpectedEof:
            raise StopIteration from None
        except DecodeError:
            self._pos += self.word_size
            return self._pos, f"{addr:8x}:\t \t<UNDEFINED>"
        self._pos += self.word_size
        return self._pos, f"{addr:8x}:\t{insn.raw:08x} \t{insn}"