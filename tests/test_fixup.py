import pytest

from rvencode.encoding import (
    BType,
    CbType,
    CjType,
    IType,
    Opcode,
    encode,
    to_i20_i12_imm_pair,
)
from rvencode.fixup import FixupKind
from rvencode.types import CRegister, Register


def _sext(value, bits):
    value &= (1 << bits) - 1
    if value & (1 << (bits - 1)):
        value -= 1 << bits
    return value


def _field(word, lo, width):
    return (word >> lo) & ((1 << width) - 1)


def _j_offset(word):
    imm = (
        (_field(word, 31, 1) << 20)
        | (_field(word, 21, 10) << 1)
        | (_field(word, 20, 1) << 11)
        | (_field(word, 12, 8) << 12)
    )
    return _sext(imm, 21)


def _word(value, size=4):
    return bytearray(value.to_bytes(size, "little"))


def _branch(offset=0):
    return BType(opcode=Opcode.BRANCH, funct3=0b001, rs1=Register.A0, rs2=Register.A1, offset=offset).encode()


@pytest.mark.parametrize("offset", [0, 2, 0x7E, 0xFFE, -2, -0x800, -0x1000])
def test_branch_fixup(offset):
    buf = _word(_branch())
    FixupKind.BRANCH.apply(buf, 0, offset)
    assert int.from_bytes(buf, "little") == _branch(offset)


@pytest.mark.parametrize("offset", [0, 2, 0x7FE, 0x800, 0xFFFFE, -2, -0x1000, -0x100000])
def test_jump_fixup(offset):
    original = encode((0, 20), (int(Register.RA), 5), (int(Opcode.JAL), 7))
    buf = _word(original)
    FixupKind.JUMP.apply(buf, 0, offset)
    word = int.from_bytes(buf, "little")
    assert _j_offset(word) == offset
    assert _field(word, 0, 12) == _field(original, 0, 12)


@pytest.mark.parametrize("offset", [0, 2, 0x7E, 0x7FE, -2, -0x800])
def test_c_jump_fixup(offset):
    buf = _word(CjType(op=0b01, funct3=0b101).encode(), 2)
    FixupKind.C_JUMP.apply(buf, 0, offset)
    assert int.from_bytes(buf, "little") == CjType(op=0b01, funct3=0b101, offset=offset).encode()


@pytest.mark.parametrize("offset", [0, 2, 0x7E, 0xFE, -2, -0x100])
def test_c_branch_fixup(offset):
    buf = _word(CbType(op=0b01, funct3=0b110, rs=CRegister.A2).encode(), 2)
    FixupKind.C_BRANCH.apply(buf, 0, offset)
    expected = CbType(op=0b01, funct3=0b110, rs=CRegister.A2, offset=offset).encode()
    assert int.from_bytes(buf, "little") == expected


def _auipc(rd, upper):
    return encode((upper, 20), (int(rd), 5), (int(Opcode.AUIPC), 7))


@pytest.mark.parametrize("kind", [FixupKind.JUMP_FAR, FixupKind.LOAD])
@pytest.mark.parametrize("offset", [0, 0x7FF, 0x800, -0x800, -0x801, 0x12345678, -0x80000000, 0x7FFFFFFF])
def test_far_fixup(kind, offset):
    second = IType(opcode=Opcode.JALR, rd=Register.RA, rs=Register.T0)
    prefix = b"\xaa\xbb\xcc\xdd"
    suffix = b"\xee\xff"
    buf = bytearray(prefix) + _word(_auipc(Register.T0, 0)) + _word(second.encode()) + bytearray(suffix)
    kind.apply(buf, 4, offset)
    upper, lower = to_i20_i12_imm_pair(offset)
    expected_second = IType(opcode=Opcode.JALR, rd=Register.RA, rs=Register.T0, imm12=lower).encode()
    assert bytes(buf[:4]) == prefix
    assert bytes(buf[12:]) == suffix
    assert int.from_bytes(buf[4:8], "little") == _auipc(Register.T0, upper)
    assert int.from_bytes(buf[8:12], "little") == expected_second


def test_fixup_overwrites_previous_offset():
    once = _word(_branch())
    FixupKind.BRANCH.apply(once, 0, -0x100)
    twice = _word(_branch())
    FixupKind.BRANCH.apply(twice, 0, 0x7E)
    FixupKind.BRANCH.apply(twice, 0, -0x100)
    assert twice == once


@pytest.mark.parametrize(
    "kind, offset",
    [
        (FixupKind.BRANCH, 0x1000),
        (FixupKind.BRANCH, -0x1002),
        (FixupKind.JUMP, 0x100000),
        (FixupKind.C_JUMP, 0x800),
        (FixupKind.C_BRANCH, 0x100),
        (FixupKind.C_BRANCH, -0x102),
        (FixupKind.LOAD, 0x80000000),
        (FixupKind.JUMP_FAR, -0x80000001),
    ],
)
def test_offset_out_of_range(kind, offset):
    buf = bytearray(8)
    with pytest.raises(ValueError):
        kind.apply(buf, 0, offset)
    assert buf == bytearray(8)


@pytest.mark.parametrize(
    "kind, size, start",
    [
        (FixupKind.BRANCH, 3, 0),
        (FixupKind.JUMP, 4, 1),
        (FixupKind.C_JUMP, 1, 0),
        (FixupKind.C_BRANCH, 2, -1),
        (FixupKind.JUMP_FAR, 6, 0),
        (FixupKind.LOAD, 8, 4),
    ],
)
def test_outside_buffer(kind, size, start):
    with pytest.raises(IndexError):
        kind.apply(bytearray(size), start, 0)