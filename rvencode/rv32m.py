"""Encoders for the RV32M multiply and divide extension."""

from __future__ import annotations

from rvencode.encoding import Opcode, RType
from rvencode.types import Register


def _muldiv(funct3: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, 1, rd, rs1, rs2).encode()


def mul(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b000, rd, rs1, rs2)


def mulh(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b001, rd, rs1, rs2)


def mulhsu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b010, rd, rs1, rs2)


def mulhu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b011, rd, rs1, rs2)


def div(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b100, rd, rs1, rs2)


def divu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b101, rd, rs1, rs2)


def rem(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b110, rd, rs1, rs2)


def remu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv(0b111, rd, rs1, rs2)