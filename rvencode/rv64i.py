"""Encoders for the instructions that RV64I adds to or changes from RV32I."""

from __future__ import annotations

from rvencode.encoding import (
    IType,
    Opcode,
    RType,
    SType,
    encode,
    is_signed_nbit_integer,
)
from rvencode.types import Register


def _op_imm(funct3: int, rd: Register, rs: Register, imm12: int) -> int:
    return IType(Opcode.OP_IMM, funct3, rd, rs, imm12).encode()


def _op_imm32(funct3: int, rd: Register, rs: Register, imm12: int) -> int:
    return IType(Opcode.OP_IMM32, funct3, rd, rs, imm12).encode()


def _op32(funct3: int, funct7: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP32, funct3, funct7, rd, rs1, rs2).encode()


def _shift64(funct6: int, shamt: int) -> int:
    return encode((funct6, 6), (shamt, 6))


def _shift32(funct7: int, shamt: int) -> int:
    return encode((funct7, 7), (shamt, 5))


def lui(rd: Register, imm20: int) -> int:
    """Load the signed 20-bit immediate into bits 31..12 of rd, sign-extended."""
    if not is_signed_nbit_integer(20, imm20):
        raise ValueError(f"immediate {imm20} does not fit in 20 signed bits")
    return encode((imm20, 20), (int(rd), 5), (int(Opcode.LUI), 7))


def lwu(rd: Register, base: Register, offset: int) -> int:
    """Load a zero-extended word."""
    return IType(Opcode.LOAD, 0b110, rd, base, offset).encode()


def ld(rd: Register, base: Register, offset: int) -> int:
    """Load a doubleword."""
    return IType(Opcode.LOAD, 0b011, rd, base, offset).encode()


def sd(rs: Register, base: Register, offset: int) -> int:
    """Store a doubleword."""
    return SType(Opcode.STORE, 0b011, rs, base, offset).encode()


def slli(rd: Register, rs: Register, shamt: int) -> int:
    """Shift left by the low six bits of shamt."""
    return _op_imm(0b001, rd, rs, _shift64(0, shamt))


def srli(rd: Register, rs: Register, shamt: int) -> int:
    """Logical shift right by the low six bits of shamt."""
    return _op_imm(0b101, rd, rs, _shift64(0, shamt))


def srai(rd: Register, rs: Register, shamt: int) -> int:
    """Arithmetic shift right by the low six bits of shamt."""
    return _op_imm(0b101, rd, rs, _shift64(0b010000, shamt))


def addiw(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm32(0b000, rd, rs, imm12)


def slliw(rd: Register, rs: Register, shamt: int) -> int:
    """32-bit shift left by the low five bits of shamt."""
    return _op_imm32(0b001, rd, rs, _shift32(0, shamt))


def srliw(rd: Register, rs: Register, shamt: int) -> int:
    """32-bit logical shift right by the low five bits of shamt."""
    return _op_imm32(0b101, rd, rs, _shift32(0, shamt))


def sraiw(rd: Register, rs: Register, shamt: int) -> int:
    """32-bit arithmetic shift right by the low five bits of shamt."""
    return _op_imm32(0b101, rd, rs, _shift32(0b0100000, shamt))


def addw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b000, 0, rd, rs1, rs2)


def subw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b000, 0b0100000, rd, rs1, rs2)


def sllw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b001, 0, rd, rs1, rs2)


def srlw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b101, 0, rd, rs1, rs2)


def sraw(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op32(0b101, 0b0100000, rd, rs1, rs2)


def negw(rd: Register, rs: Register) -> int:
    return subw(rd, Register.ZERO, rs)


def sext_w(rd: Register, rs: Register) -> int:
    return addiw(rd, rs, 0)