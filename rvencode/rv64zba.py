"""Encoders for the Zba instructions that RV64 adds."""

from __future__ import annotations

from rvencode.encoding import IType, Opcode, RType, encode
from rvencode.types import Register


def _op32(funct3: int, funct7: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP32, funct3, funct7, rd, rs1, rs2).encode()


def add_uw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b000, 0b0000100, rd, rs1, rs2)


def sh1add_uw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b010, 0b0010000, rd, rs1, rs2)


def sh2add_uw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b100, 0b0010000, rd, rs1, rs2)


def sh3add_uw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b110, 0b0010000, rd, rs1, rs2)


def slli_uw(rd: Register, rs: Register, shamt: int) -> int:
    """Shift the zero-extended low word left by the low six bits of shamt."""
    imm12 = encode((0b10, 6), (shamt, 6))
    return IType(Opcode.OP_IMM32, 0b001, rd, rs, imm12).encode()