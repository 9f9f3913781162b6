"""Encoders for the RV32I base integer instruction set and its pseudo-instructions."""

from __future__ import annotations

from rvencode.encoding import (
    BType,
    IType,
    Opcode,
    RType,
    SType,
    encode,
    is_signed_nbit_integer,
)
from rvencode.types import Register


def _op(funct3: int, funct7: int, rd: Register, rs1: Register, rs2: Register) -> int:
    return RType(Opcode.OP, funct3, funct7, rd, rs1, rs2).encode()


def _op_imm(funct3: int, rd: Register, rs: Register, imm12: int) -> int:
    return IType(Opcode.OP_IMM, funct3, rd, rs, imm12).encode()


def _load(funct3: int, rd: Register, base: Register, offset: int) -> int:
    return IType(Opcode.LOAD, funct3, rd, base, offset).encode()


def _store(funct3: int, rs: Register, base: Register, offset: int) -> int:
    return SType(Opcode.STORE, funct3, rs, base, offset).encode()


def _branch(funct3: int, rs1: Register, rs2: Register, offset: int) -> int:
    return BType(Opcode.BRANCH, funct3, rs1, rs2, offset).encode()


def _shift_imm(funct7: int, shamt: int) -> int:
    return encode((funct7, 7), (shamt, 5))


# Base instructions

def lui(rd: Register, imm20: int) -> int:
    """Load the unsigned 20-bit immediate into the upper bits of rd."""
    if not 0 <= imm20 < (1 << 20):
        raise ValueError(f"immediate {imm20} does not fit in 20 unsigned bits")
    return encode((imm20, 20), (int(rd), 5), (int(Opcode.LUI), 7))


def auipc(rd: Register, imm20: int) -> int:
    """Add the signed 20-bit upper immediate to pc."""
    if not is_signed_nbit_integer(20, imm20):
        raise ValueError(f"immediate {imm20} does not fit in 20 signed bits")
    return encode((imm20, 20), (int(rd), 5), (int(Opcode.AUIPC), 7))


def jal(rd: Register, offset: int) -> int:
    """Jump by a signed 21-bit offset, linking into rd."""
    if not is_signed_nbit_integer(21, offset):
        raise ValueError(f"offset {offset} does not fit in 21 signed bits")
    return encode(
        (offset >> 20, 1),
        (offset >> 1, 10),
        (offset >> 11, 1),
        (offset >> 12, 8),
        (int(rd), 5),
        (int(Opcode.JAL), 7),
    )


def jalr(rd: Register, base: Register, offset: int) -> int:
    return IType(Opcode.JALR, 0b000, rd, base, offset).encode()


def beq(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b000, rs1, rs2, offset)


def bne(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b001, rs1, rs2, offset)


def blt(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b100, rs1, rs2, offset)


def bge(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b101, rs1, rs2, offset)


def bltu(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b110, rs1, rs2, offset)


def bgeu(rs1: Register, rs2: Register, offset: int) -> int:
    return _branch(0b111, rs1, rs2, offset)


def lb(rd: Register, base: Register, offset: int) -> int:
    return _load(0b000, rd, base, offset)


def lh(rd: Register, base: Register, offset: int) -> int:
    return _load(0b001, rd, base, offset)


def lw(rd: Register, base: Register, offset: int) -> int:
    return _load(0b010, rd, base, offset)


def lbu(rd: Register, base: Register, offset: int) -> int:
    return _load(0b100, rd, base, offset)


def lhu(rd: Register, base: Register, offset: int) -> int:
    return _load(0b101, rd, base, offset)


def sb(rs: Register, base: Register, offset: int) -> int:
    return _store(0b000, rs, base, offset)


def sh(rs: Register, base: Register, offset: int) -> int:
    return _store(0b001, rs, base, offset)


def sw(rs: Register, base: Register, offset: int) -> int:
    return _store(0b010, rs, base, offset)


def addi(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b000, rd, rs, imm12)


def slti(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b010, rd, rs, imm12)


def sltiu(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b011, rd, rs, imm12)


def xori(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b100, rd, rs, imm12)


def ori(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b110, rd, rs, imm12)


def andi(rd: Register, rs: Register, imm12: int) -> int:
    return _op_imm(0b111, rd, rs, imm12)


def slli(rd: Register, rs: Register, shamt: int) -> int:
    """Shift left by the low five bits of shamt."""
    return _op_imm(0b001, rd, rs, _shift_imm(0, shamt))


def srli(rd: Register, rs: Register, shamt: int) -> int:
    """Logical shift right by the low five bits of shamt."""
    return _op_imm(0b101, rd, rs, _shift_imm(0, shamt))


def srai(rd: Register, rs: Register, shamt: int) -> int:
    """Arithmetic shift right by the low five bits of shamt."""
    return _op_imm(0b101, rd, rs, _shift_imm(0b0100000, shamt))


def add(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b000, 0, rd, rs1, rs2)


def sub(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b000, 0b0100000, rd, rs1, rs2)


def sll(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b001, 0, rd, rs1, rs2)


def slt(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b010, 0, rd, rs1, rs2)


def sltu(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b011, 0, rd, rs1, rs2)


def xor(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b100, 0, rd, rs1, rs2)


def srl(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b101, 0, rd, rs1, rs2)


def sra(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b101, 0b0100000, rd, rs1, rs2)


def or_(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b110, 0, rd, rs1, rs2)


def and_(rd: Register, rs1: Register, rs2: Register) -> int:
    return _op(0b111, 0, rd, rs1, rs2)


def ecall() -> int:
    return IType(opcode=Opcode.SYSTEM, imm12=0).encode()


def ebreak() -> int:
    return IType(opcode=Opcode.SYSTEM, imm12=1).encode()


def unimp() -> int:
    """The canonical illegal instruction (csrrw zero, cycle, zero)."""
    return IType(opcode=Opcode.SYSTEM, funct3=0b001, imm12=-0x400).encode()


# Pseudo-instructions

def nop() -> int:
    return addi(Register.ZERO, Register.ZERO, 0)


def mv(rd: Register, rs: Register) -> int:
    return addi(rd, rs, 0)


def not_(rd: Register, rs: Register) -> int:
    return xori(rd, rs, -1)


def neg(rd: Register, rs: Register) -> int:
    return sub(rd, Register.ZERO, rs)


def zext_b(rd: Register, rs: Register) -> int:
    return andi(rd, rs, 0xFF)


def seqz(rd: Register, rs: Register) -> int:
    return sltiu(rd, rs, 1)


def snez(rd: Register, rs: Register) -> int:
    return sltu(rd, Register.ZERO, rs)


def sltz(rd: Register, rs: Register) -> int:
    return slt(rd, rs, Register.ZERO)


def sgtz(rd: Register, rs: Register) -> int:
    return slt(rd, Register.ZERO, rs)


def beqz(rs: Register, offset: int) -> int:
    return beq(rs, Register.ZERO, offset)


def bnez(rs: Register, offset: int) -> int:
    return bne(rs, Register.ZERO, offset)


def blez(rs: Register, offset: int) -> int:
    return bge(Register.ZERO, rs, offset)


def bgez(rs: Register, offset: int) -> int:
    return bge(rs, Register.ZERO, offset)


def bltz(rs: Register, offset: int) -> int:
    return blt(Register.ZERO, rs, offset)


def bgtz(rs: Register, offset: int) -> int:
    return blt(rs, Register.ZERO, offset)


def bgt(rs1: Register, rs2: Register, offset: int) -> int:
    return blt(rs2, rs1, offset)


def ble(rs1: Register, rs2: Register, offset: int) -> int:
    return bge(rs2, rs1, offset)


def bgtu(rs1: Register, rs2: Register, offset: int) -> int:
    return bltu(rs2, rs1, offset)


def bleu(rs1: Register, rs2: Register, offset: int) -> int:
    return bgeu(rs2, rs1, offset)


def j(offset: int) -> int:
    return jal(Register.ZERO, offset)


def jr(rs: Register) -> int:
    return jalr(Register.ZERO, rs, 0)


def ret() -> int:
    return jalr(Register.ZERO, Register.RA, 0)