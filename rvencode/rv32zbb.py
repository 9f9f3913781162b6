"""Encoders for the Zbb basic bit-manipulation extension on RV32."""

from __future__ import annotations

from rvencode.encoding import IType, Opcode, RType, encode
from rvencode.types import Register


def _op(funct3: int, funct7: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, funct7, rd, rs1, rs2).encode()


def _unary(opcode: Opcode, funct3: int, imm12: int, rd: Register, rs: Register) -> int:
    return IType(opcode, funct3, rd, rs, imm12).encode()


def andn(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b111, 0b0100000, rd, rs1, rs2)


def clz(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b001, 0b0110000_00000, rd, rs)


def cpop(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b001, 0b0110000_00010, rd, rs)


def ctz(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b001, 0b0110000_00001, rd, rs)


def max_(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b110, 0b0000101, rd, rs1, rs2)


def maxu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b111, 0b0000101, rd, rs1, rs2)


def min_(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b100, 0b0000101, rd, rs1, rs2)


def minu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b101, 0b0000101, rd, rs1, rs2)


def orc_b(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b101, 0b0010100_00111, rd, rs)


def orn(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b110, 0b0100000, rd, rs1, rs2)


def rev8(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b101, 0b0110100_11000, rd, rs)


def rol(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b001, 0b0110000, rd, rs1, rs2)


def ror(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b101, 0b0110000, rd, rs1, rs2)


def rori(rd: Register, rs: Register, shamt: int) -> int:
    """Rotate right by the low five bits of shamt."""
    imm12 = encode((0b0110000, 7), (shamt, 5))
    return IType(Opcode.OP_IMM, 0b101, rd, rs, imm12).encode()


def sext_b(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b001, 0b0110000_00100, rd, rs)


def sext_h(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP_IMM, 0b001, 0b0110000_00101, rd, rs)


def xnor(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b100, 0b0100000, rd, rs1, rs2)


def zext_h(rd: Register, rs: Register) -> int:
    return _unary(Opcode.OP, 0b100, 0b0000100_00000, rd, rs)