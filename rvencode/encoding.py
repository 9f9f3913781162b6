"""Bit packing helpers and the base instruction formats."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rvencode.types import CRegister, Register


def is_signed_nbit_integer(n: int, value: int) -> bool:
    """Whether value fits into an n-bit two's complement integer."""
    return -(1 << (n - 1)) <= value < (1 << (n - 1))


def encode(*fields: tuple[int, int]) -> int:
    """Pack (value, width) fields into an integer, most significant first.

    Each value is truncated to its width.
    """
    bits = 0
    for value, width in fields:
        bits = (bits << width) | (value & ((1 << width) - 1))
    return bits


def to_i20_i12_imm_pair(imm: int) -> tuple[int, int]:
    """Split imm into an upper 20-bit and a sign-extended lower 12-bit part.

    The parts satisfy ``(upper << 12) + lower == imm``.
    """
    upper = (imm >> 12) + ((imm >> 11) & 1)
    lower = imm & 0xFFF
    if lower & 0x800:
        lower -= 0x1000
    return upper, lower


def _require_signed(n: int, value: int, what: str) -> None:
    if not is_signed_nbit_integer(n, value):
        raise ValueError(f"{what} {value} does not fit in {n} signed bits")


class Opcode(enum.IntEnum):
    """Major opcodes of 32-bit instructions."""

    NULL = 0
    LOAD = 0b0000011
    LOAD_FP = 0b0000111
    CUSTOM0 = 0b0001011
    MISC_MEM = 0b0001111
    OP_IMM = 0b0010011
    AUIPC = 0b0010111
    OP_IMM32 = 0b0011011
    STORE = 0b0100011
    STORE_FP = 0b0100111
    CUSTOM1 = 0b0101011
    AMO = 0b0101111
    OP = 0b0110011
    LUI = 0b0110111
    OP32 = 0b0111011
    MADD = 0b1000011
    MSUB = 0b1000111
    NMSUB = 0b1001011
    NMADD = 0b1001111
    OP_FP = 0b1010011
    CUSTOM2 = 0b1011011
    BRANCH = 0b1100011
    JALR = 0b1100111
    JAL = 0b1101111
    SYSTEM = 0b1110011
    CUSTOM3 = 0b1111011


@dataclass(frozen=True)
class RType:
    """Register-register instruction."""

    opcode: Opcode
    funct3: int
    funct7: int
    rd: Register
    rs1: Register
    rs2: Register

    def encode(self) -> int:
        return encode(
            (self.funct7, 7),
            (int(self.rs2), 5),
            (int(self.rs1), 5),
            (self.funct3, 3),
            (int(self.rd), 5),
            (int(self.opcode), 7),
        )


@dataclass(frozen=True)
class IType:
    """Register-immediate instruction with a 12-bit signed immediate."""

    opcode: Opcode = Opcode.NULL
    funct3: int = 0
    rd: Register = Register.ZERO
    rs: Register = Register.ZERO
    imm12: int = 0

    def encode(self) -> int:
        _require_signed(12, self.imm12, "immediate")
        return encode(
            (self.imm12, 12),
            (int(self.rs), 5),
            (self.funct3, 3),
            (int(self.rd), 5),
            (int(self.opcode), 7),
        )


@dataclass(frozen=True)
class SType:
    """Store instruction with a 12-bit signed offset."""

    opcode: Opcode
    funct3: int
    rs: Register
    base: Register
    imm12: int

    def encode(self) -> int:
        _require_signed(12, self.imm12, "offset")
        return encode(
            (self.imm12 >> 5, 7),
            (int(self.rs), 5),
            (int(self.base), 5),
            (self.funct3, 3),
            (self.imm12, 5),
            (int(self.opcode), 7),
        )


@dataclass(frozen=True)
class BType:
    """Conditional branch with a 13-bit signed offset."""

    opcode: Opcode = Opcode.NULL
    funct3: int = 0
    rs1: Register = Register.ZERO
    rs2: Register = Register.ZERO
    offset: int = 0

    def encode(self) -> int:
        _require_signed(13, self.offset, "offset")
        off = self.offset
        return encode(
            (off >> 12, 1),
            (off >> 5, 6),
            (int(self.rs2), 5),
            (int(self.rs1), 5),
            (self.funct3, 3),
            (off >> 1, 4),
            (off >> 11, 1),
            (int(self.opcode), 7),
        )


@dataclass(frozen=True)
class CrType:
    """Compressed register instruction."""

    op: int
    rs: Register
    rd: Register
    funct4: int

    def encode(self) -> int:
        return encode(
            (self.funct4, 4),
            (int(self.rd), 5),
            (int(self.rs), 5),
            (self.op, 2),
        )


@dataclass(frozen=True)
class CiType:
    """Compressed immediate instruction with a 6-bit immediate."""

    op: int
    rd: Register
    imm: int
    funct3: int

    def encode(self) -> int:
        return encode(
            (self.funct3, 3),
            (self.imm >> 5, 1),
            (int(self.rd), 5),
            (self.imm, 5),
            (self.op, 2),
        )


@dataclass(frozen=True)
class CaType:
    """Compressed arithmetic instruction on compressed registers."""

    op: int
    rs: CRegister
    funct2: int
    rd: CRegister
    funct6: int

    def encode(self) -> int:
        return encode(
            (self.funct6, 6),
            (int(self.rd), 3),
            (self.funct2, 2),
            (int(self.rs), 3),
            (self.op, 2),
        )


@dataclass(frozen=True)
class CbType:
    """Compressed branch with a 9-bit signed offset."""

    op: int = 0
    rs: CRegister = CRegister.S0
    offset: int = 0
    funct3: int = 0

    def encode(self) -> int:
        off = self.offset
        return encode(
            (self.funct3, 3),
            (off >> 8, 1),
            (off >> 3, 2),
            (int(self.rs), 3),
            (off >> 6, 2),
            (off >> 1, 2),
            (off >> 5, 1),
            (self.op, 2),
        )


@dataclass(frozen=True)
class CjType:
    """Compressed jump with a 12-bit signed offset."""

    op: int = 0
    offset: int = 0
    funct3: int = 0

    def encode(self) -> int:
        off = self.offset
        return encode(
            (self.funct3, 3),
            (off >> 11, 1),
            (off >> 4, 1),
            (off >> 8, 2),
            (off >> 10, 1),
            (off >> 6, 1),
            (off >> 7, 1),
            (off >> 1, 3),
            (off >> 5, 1),
            (self.op, 2),
        )