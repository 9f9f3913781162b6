"""Encoders for the Zbs single-bit extension on RV32."""

from __future__ import annotations

from rvencode.encoding import IType, Opcode, RType, encode
from rvencode.types import Register


def _op(funct3: int, funct7: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, funct7, rd, rs1, rs2).encode()


def _op_shamt(funct3: int, funct7: int, rd: Register, rs: Register, shamt: int) -> int:
    imm12 = encode((funct7, 7), (shamt, 5))
    return IType(Opcode.OP_IMM, funct3, rd, rs, imm12).encode()


def bclr(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b001, 0b0100100, rd, rs1, rs2)


def bclri(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b0100100, rd, rs, shamt)


def bext(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b101, 0b0100100, rd, rs1, rs2)


def bexti(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b101, 0b0100100, rd, rs, shamt)


def binv(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b001, 0b0110100, rd, rs1, rs2)


def binvi(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b0110100, rd, rs, shamt)


def bset(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b001, 0b0010100, rd, rs1, rs2)


def bseti(rd: Register, rs: Register, shamt: int) -> int:
    return _op_shamt(0b001, 0b0010100, rd, rs, shamt)