"""Encoders for the RV32C compressed instruction set."""

from __future__ import annotations

from rvencode.encoding import CaType, CbType, CiType, CjType, CrType, encode
from rvencode.types import CRegister, Register


def _arith(funct2: int, rd: CRegister, rs: CRegister) -> int:
    return CaType(op=0b01, rs=rs, funct2=funct2, rd=rd, funct6=0b100011).encode()


def unimp() -> int:
    """The all-zero illegal compressed instruction."""
    return 0


def addi4spn(rd: CRegister, imm: int) -> int:
    """rd = sp + imm, for a scaled non-zero unsigned immediate."""
    return encode(
        (0b000, 3),
        (imm >> 4, 2),
        (imm >> 6, 4),
        (imm >> 2, 1),
        (imm >> 3, 1),
        (int(rd), 3),
        (0b00, 2),
    )


def lw(rd: CRegister, base: CRegister, offset: int) -> int:
    return encode(
        (0b010, 3),
        (offset >> 3, 3),
        (int(base), 3),
        (offset >> 2, 1),
        (offset >> 6, 1),
        (int(rd), 3),
        (0b00, 2),
    )


def sw(rd: CRegister, base: CRegister, offset: int) -> int:
    """Store rd to base + offset."""
    return encode(
        (0b110, 3),
        (offset >> 3, 3),
        (int(base), 3),
        (offset >> 2, 1),
        (offset >> 6, 1),
        (int(rd), 3),
        (0b00, 2),
    )


def nop() -> int:
    return encode((0b000, 3), (0, 1), (0, 5), (0, 5), (0b01, 2))


def addi(rd: Register, imm: int) -> int:
    return CiType(op=0b01, rd=rd, imm=imm, funct3=0b000).encode()


def li(rd: Register, imm: int) -> int:
    return CiType(op=0b01, rd=rd, imm=imm, funct3=0b010).encode()


def addi16sp(imm: int) -> int:
    """sp = sp + imm, for a non-zero multiple of 16."""
    return encode(
        (0b011, 3),
        (imm >> 9, 1),
        (int(Register.SP), 5),
        (imm >> 4, 1),
        (imm >> 6, 1),
        (imm >> 7, 2),
        (imm >> 5, 1),
        (0b01, 2),
    )


def lui(rd: Register, imm: int) -> int:
    return CiType(op=0b01, rd=rd, imm=imm, funct3=0b011).encode()


def srli(rd: CRegister, shamt: int) -> int:
    return encode(
        (0b100, 3),
        (0, 1),
        (0b00, 2),
        (int(rd), 3),
        (shamt, 5),
        (0b01, 2),
    )


def srai(rd: CRegister, shamt: int) -> int:
    return encode(
        (0b100, 3),
        (0, 1),
        (0b01, 2),
        (int(rd), 3),
        (shamt, 5),
        (0b01, 2),
    )


def andi(rd: CRegister, imm: int) -> int:
    return encode(
        (0b100, 3),
        (imm >> 5, 1),
        (0b10, 2),
        (int(rd), 3),
        (imm, 5),
        (0b01, 2),
    )


def sub(rd: CRegister, rs: CRegister) -> int:
    return _arith(0b00, rd, rs)


def xor(rd: CRegister, rs: CRegister) -> int:
    return _arith(0b01, rd, rs)


def or_(rd: CRegister, rs: CRegister) -> int:
    return _arith(0b10, rd, rs)


def and_(rd: CRegister, rs: CRegister) -> int:
    return _arith(0b11, rd, rs)


def j(offset: int) -> int:
    return CjType(op=0b01, offset=offset, funct3=0b101).encode()


def beqz(rs: CRegister, offset: int) -> int:
    return CbType(op=0b01, rs=rs, offset=offset, funct3=0b110).encode()


def bnez(rs: CRegister, offset: int) -> int:
    return CbType(op=0b01, rs=rs, offset=offset, funct3=0b111).encode()


def slli(rd: Register, shamt: int) -> int:
    """Shift left by the low five bits of shamt."""
    return CiType(op=0b10, rd=rd, imm=shamt & 0x1F, funct3=0b000).encode()


def lwsp(rd: Register, offset: int) -> int:
    return encode(
        (0b010, 3),
        (offset >> 5, 1),
        (int(rd), 5),
        (offset >> 2, 3),
        (offset >> 6, 2),
        (0b10, 2),
    )


def jr(rs: Register) -> int:
    return CrType(op=0b10, rs=Register.ZERO, rd=rs, funct4=0b1000).encode()


def mv(rd: Register, rs: Register) -> int:
    return CrType(op=0b10, rs=rs, rd=rd, funct4=0b1000).encode()


def ebreak() -> int:
    return encode((0b100, 3), (1, 1), (0, 5), (0, 5), (0b10, 2))


def jalr(rs: Register) -> int:
    return CrType(op=0b10, rs=Register.ZERO, rd=rs, funct4=0b1001).encode()


def add(rd: Register, rs: Register) -> int:
    return CrType(op=0b10, rs=rs, rd=rd, funct4=0b1001).encode()


def swsp(rs: Register, offset: int) -> int:
    return encode(
        (0b110, 3),
        (offset >> 2, 4),
        (offset >> 6, 2),
        (int(rs), 5),
        (0b10, 2),
    )