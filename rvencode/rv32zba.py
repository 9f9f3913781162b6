"""Encoders for the Zba address generation extension on RV32."""

from __future__ import annotations

from rvencode.encoding import Opcode, RType
from rvencode.types import Register


def _shadd(funct3: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, 0b0010000, rd, rs1, rs2).encode()


def sh1add(rd: Register, rs1: Register, rs2: Register) -> int:
    return _shadd(0b010, rd, rs1, rs2)


def sh2add(rd: Register, rs1: Register, rs2: Register) -> int:
    return _shadd(0b100, rd, rs1, rs2)


def sh3add(rd: Register, rs1: Register, rs2: Register) -> int:
    return _shadd(0b110, rd, rs1, rs2)