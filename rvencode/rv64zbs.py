"""Encoders for the Zbs immediate instructions with six-bit shift amounts on RV64."""

from __future__ import annotations

from rvencode.encoding import IType, Opcode, encode
from rvencode.types import Register


def _op_shamt(funct3: int, funct6: int, rd: Register, rs: Register, shamt: int) -> int:
    imm12 = encode((funct6, 6), (shamt, 6))
    return IType(Opcode.OP_IMM, funct3, rd, rs, imm12).encode()


def bclri(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b010010, rd, rs, shamt)


def bexti(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b101, 0b010010, rd, rs, shamt)


def binvi(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b011010, rd, rs, shamt)


def bseti(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b001010, rd, rs, shamt)