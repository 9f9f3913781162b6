"""Encoders for the Zbc carry-less multiplication extension."""

from __future__ import annotations

from rvencode.encoding import Opcode, RType
from rvencode.types import Register


def _clmul(funct3: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, 0b0000101, rd, rs1, rs2).encode()


def clmul(rd: Register, rs1: Register, rs2: Register) -> int:
    return _clmul(0b001, rd, rs1, rs2)


def clmulh(rd: Register, rs1: Register, rs2: Register) -> int:
    return _clmul(0b011, rd, rs1, rs2)


def clmulr(rd: Register, rs1: Register, rs2: Register) -> int:
    return _clmul(0b010, rd, rs1, rs2)