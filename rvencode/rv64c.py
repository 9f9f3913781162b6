"""Encoders for the compressed instructions that RV64C adds or changes."""

from __future__ import annotations

from rvencode.encoding import CaType, CiType, encode
from rvencode.types import CRegister, Register


def ld(rd: CRegister, base: CRegister, offset: int) -> int:
    return encode(
        (0b011, 3),
        (offset >> 3, 3),
        (int(base), 3),
        (offset >> 6, 2),
        (int(rd), 3),
        (0b00, 2),
    )


def sd(rd: CRegister, base: CRegister, offset: int) -> int:
    """Store rd to base + offset."""
    return encode(
        (0b111, 3),
        (offset >> 3, 3),
        (int(base), 3),
        (offset >> 6, 2),
        (int(rd), 3),
        (0b00, 2),
    )


def addiw(rd: Register, imm: int) -> int:
    return CiType(op=0b01, rd=rd, imm=imm, funct3=0b001).encode()


def srli(rd: CRegister, shamt: int) -> int:
    return encode(
        (0b100, 3),
        (shamt >> 5, 1),
        (0b00, 2),
        (int(rd), 3),
        (shamt, 5),
        (0b01, 2),
    )


def srai(rd: CRegister, shamt: int) -> int:
    return encode(
        (0b100, 3),
        (shamt >> 5, 1),
        (0b01, 2),
        (int(rd), 3),
        (shamt, 5),
        (0b01, 2),
    )


def subw(rd: CRegister, rs: CRegister) -> int:
    return CaType(op=0b01, rs=rs, funct2=0b00, rd=rd, funct6=0b100111).encode()


def addw(rd: CRegister, rs: CRegister) -> int:
    return CaType(op=0b01, rs=rs, funct2=0b01, rd=rd, funct6=0b100111).encode()


def slli(rd: Register, shamt: int) -> int:
    """Shift left by the low six bits of shamt."""
    return CiType(op=0b10, rd=rd, imm=shamt & 0x3F, funct3=0b000).encode()


def ldsp(rd: Register, offset: int) -> int:
    return encode(
        (0b011, 3),
        (offset >> 5, 1),
        (int(rd), 5),
        (offset >> 3, 2),
        (offset >> 6, 3),
        (0b10, 2),
    )


def sdsp(rs: Register, offset: int) -> int:
    return encode(
        (0b111, 3),
        (offset >> 3, 3),
        (offset >> 6, 3),
        (int(rs), 5),
        (0b10, 2),
    )


def sext_w(rd: Register) -> int:
    return addiw(rd, 0)