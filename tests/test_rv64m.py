import itertools

import pytest

from rvencode import rv32m, rv64m
from rvencode.encoding import Opcode
from rvencode.types import Register

REGISTERS = [
    Register.ZERO, Register.RA, Register.SP, Register.GP, Register.TP,
    Register.T0, Register.S0, Register.A0, Register.A1, Register.T6,
]


def _fields(word):
    return {
        "opcode": word & 0x7F,
        "rd": (word >> 7) & 0x1F,
        "funct3": (word >> 12) & 0x7,
        "rs1": (word >> 15) & 0x1F,
        "rs2": (word >> 20) & 0x1F,
        "funct7": word >> 25,
    }


@pytest.mark.parametrize(
    "fn, funct3",
    [
        (rv64m.mulw, 0b000),
        (rv64m.divw, 0b100),
        (rv64m.divuw, 0b101),
        (rv64m.remw, 0b110),
        (rv64m.remuw, 0b111),
    ],
)
def test_fields(fn, funct3):
    for rd, rs1, rs2 in itertools.product(REGISTERS, repeat=3):
        f = _fields(fn(rd, rs1, rs2))
        assert f["opcode"] == Opcode.OP32
        assert f["funct3"] == funct3
        assert f["funct7"] == 1
        assert (f["rd"], f["rs1"], f["rs2"]) == (rd, rs1, rs2)


@pytest.mark.parametrize(
    "fn, wide",
    [
        (rv64m.mulw, rv32m.mul),
        (rv64m.divw, rv32m.div),
        (rv64m.divuw, rv32m.divu),
        (rv64m.remw, rv32m.rem),
        (rv64m.remuw, rv32m.remu),
    ],
)
def test_word_variant_differs_only_in_opcode(fn, wide):
    for rd, rs1, rs2 in itertools.product(REGISTERS, repeat=3):
        assert fn(rd, rs1, rs2) ^ wide(rd, rs1, rs2) == Opcode.OP ^ Opcode.OP32


def test_distinct():
    a0, a1, a2 = Register.A0, Register.A1, Register.A2
    words = {
        rv64m.mulw(a0, a1, a2),
        rv64m.divw(a0, a1, a2),
        rv64m.divuw(a0, a1, a2),
        rv64m.remw(a0, a1, a2),
        rv64m.remuw(a0, a1, a2),
    }
    assert len(words) == 5