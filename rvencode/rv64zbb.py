"""Encoders for the Zbb instructions that RV64 adds or changes."""

from __future__ import annotations

from rvencode.encoding import IType, Opcode, RType, encode
from rvencode.types import Register


def clzw(rd: Register, rs: Register) -> int:
    return IType(Opcode.OP_IMM32, 0b001, rd, rs, 0b0110000_00000).encode()


def cpopw(rd: Register, rs: Register) -> int:
    return IType(Opcode.OP_IMM32, 0b001, rd, rs, 0b0110000_00010).encode()


def ctzw(rd: Register, rs: Register) -> int:
    return IType(Opcode.OP_IMM32, 0b001, rd, rs, 0b0110000_00001).encode()


def rev8(rd: Register, rs: Register) -> int:
    return IType(Opcode.OP_IMM, 0b101, rd, rs, 0b0110101_11000).encode()


def rolw(rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP32, 0b001, 0b0110000, rd, rs1, rs2).encode()


def rori(rd: Register, rs: Register, shamt: int) -> int:
    """Rotate right by the low six bits of shamt."""
    imm12 = encode((0b011000, 6), (shamt, 6))
    return IType(Opcode.OP_IMM, 0b101, rd, rs, imm12).encode()


def roriw(rd: Register, rs: Register, shamt: int) -> int:
    """Rotate the low word right by the low five bits of shamt."""
    imm12 = encode((0b0110000, 7), (shamt, 5))
    return IType(Opcode.OP_IMM32, 0b101, rd, rs, imm12).encode()


def rorw(rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP32, 0b101, 0b0110000, rd, rs1, rs2).encode()


def zext_h(rd: Register, rs: Register) -> int:
    return IType(Opcode.OP32, 0b100, rd, rs, 0b0000100_00000).encode()