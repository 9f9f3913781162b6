import itertools

import pytest

from rvencode import rv32zbc
from rvencode.encoding import Opcode
from rvencode.types import Register

R = Register


def _fields(code):
    return {
        "opcode": code & 0x7F,
        "rd": (code >> 7) & 0x1F,
        "funct3": (code >> 12) & 0x7,
        "rs1": (code >> 15) & 0x1F,
        "rs2": (code >> 20) & 0x1F,
        "funct7": code >> 25,
    }


@pytest.mark.parametrize(
    ("func", "funct3"),
    [(rv32zbc.clmul, 0b001), (rv32zbc.clmulh, 0b011), (rv32zbc.clmulr, 0b010)],
)
def test_fields_round_trip(func, funct3):
    for rd, rs1, rs2 in itertools.product([R.ZERO, R.RA, R.S0, R.T6], repeat=3):
        fields = _fields(func(rd, rs1, rs2))
        assert fields == {
            "opcode": Opcode.OP,
            "rd": rd,
            "funct3": funct3,
            "rs1": rs1,
            "rs2": rs2,
            "funct7": 0b0000101,
        }


def test_clmul_encoding():
    assert rv32zbc.clmul(R.A0, R.A1, R.A2) == 0x0AC59533


def test_variants_are_distinct():
    codes = {f(R.A0, R.A1, R.A2) for f in (rv32zbc.clmul, rv32zbc.clmulh, rv32zbc.clmulr)}
    assert len(codes) == 3