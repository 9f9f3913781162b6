import itertools

import pytest

from rvencode import rv32zba, rv64zba
from rvencode.encoding import Opcode
from rvencode.types import Register

REGISTERS = [
    Register.ZERO, Register.RA, Register.SP, Register.GP, Register.TP,
    Register.T0, Register.S0, Register.A0, Register.A1, Register.T6,
]
SHAMTS = [0, 1, 2, 3, 4, 7, 8, 0xF, 0x10, 0x1F, 0x20, 0x3F, 0x40, 0x7F, 0x80, 0xFF]


def _fields(word):
    return {
        "opcode": word & 0x7F,
        "rd": (word >> 7) & 0x1F,
        "funct3": (word >> 12) & 0x7,
        "rs1": (word >> 15) & 0x1F,
        "rs2": (word >> 20) & 0x1F,
        "funct7": word >> 25,
    }


@pytest.mark.parametrize("fn, funct3, funct7", [
    (rv64zba.add_uw, 0b000, 0b0000100),
    (rv64zba.sh1add_uw, 0b010, 0b0010000),
    (rv64zba.sh2add_uw, 0b100, 0b0010000),
    (rv64zba.sh3add_uw, 0b110, 0b0010000),
])
def test_register_register_fields(fn, funct3, funct7):
    for rd, rs1, rs2 in itertools.product(REGISTERS, repeat=3):
        f = _fields(fn(rd, rs1, rs2))
        assert f["opcode"] == Opcode.OP32
        assert f["funct3"] == funct3
        assert f["funct7"] == funct7
        assert (f["rd"], f["rs1"], f["rs2"]) == (rd, rs1, rs2)


@pytest.mark.parametrize("uw, plain", [
    (rv64zba.sh1add_uw, rv32zba.sh1add),
    (rv64zba.sh2add_uw, rv32zba.sh2add),
    (rv64zba.sh3add_uw, rv32zba.sh3add),
])
def test_uw_differs_from_plain_only_in_opcode(uw, plain):
    for rd, rs1, rs2 in itertools.product(REGISTERS, repeat=3):
        assert uw(rd, rs1, rs2) ^ plain(rd, rs1, rs2) == Opcode.OP ^ Opcode.OP32


@pytest.mark.parametrize("shamt", SHAMTS)
def test_slli_uw_fields(shamt):
    word = rv64zba.slli_uw(Register.A0, Register.A1, shamt)
    f = _fields(word)
    assert f["opcode"] == Opcode.OP_IMM32
    assert f["funct3"] == 0b001
    assert word >> 26 == 0b10
    assert (word >> 20) & 0x3F == shamt & 0x3F
    assert (f["rd"], f["rs1"]) == (Register.A0, Register.A1)


def test_slli_uw_uses_low_six_bits():
    assert rv64zba.slli_uw(Register.T0, Register.S0, 0x41) == rv64zba.slli_uw(Register.T0, Register.S0, 1)