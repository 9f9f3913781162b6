"""Encoders for the word-sized multiply and divide instructions of RV64M."""

from __future__ import annotations

from rvencode.encoding import Opcode, RType
from rvencode.types import Register


def _muldiv32(funct3: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP32, funct3, 1, rd, rs1, rs2).encode()


def mulw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv32(0b000, rd, rs1, rs2)


def divw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv32(0b100, rd, rs1, rs2)


def divuw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv32(0b101, rd, rs1, rs2)


def remw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv32(0b110, rd, rs1, rs2)


def remuw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _muldiv32(0b111, rd, rs1, rs2)