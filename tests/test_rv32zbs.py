import itertools

import pytest

from rvencode import rv32zbs
from rvencode.encoding import Opcode
from rvencode.types import Register

R = Register


@pytest.mark.parametrize(
    ("func", "funct3", "funct7"),
    [
        (rv32zbs.bclr, 0b001, 0b0100100),
        (rv32zbs.bext, 0b101, 0b0100100),
        (rv32zbs.binv, 0b001, 0b0110100),
        (rv32zbs.bset, 0b001, 0b0010100),
    ],
)
def test_register_form_fields(func, funct3, funct7):
    for rd, rs1, rs2 in itertools.product([R.ZERO, R.A0, R.T6], repeat=3):
        code = func(rd, rs1, rs2)
        assert code & 0x7F == Opcode.OP
        assert (code >> 7) & 0x1F == rd
        assert (code >> 12) & 0x7 == funct3
        assert (code >> 15) & 0x1F == rs1
        assert (code >> 20) & 0x1F == rs2
        assert code >> 25 == funct7


@pytest.mark.parametrize(
    ("reg_form", "imm_form"),
    [
        (rv32zbs.bclr, rv32zbs.bclri),
        (rv32zbs.bext, rv32zbs.bexti),
        (rv32zbs.binv, rv32zbs.binvi),
        (rv32zbs.bset, rv32zbs.bseti),
    ],
)
def test_immediate_form_matches_register_form(reg_form, imm_form):
    for shamt in range(32):
        code = imm_form(R.A0, R.A1, shamt)
        reference = reg_form(R.A0, R.A1, R.A2)
        assert code & 0x7F == Opcode.OP_IMM
        assert code >> 25 == reference >> 25
        assert (code >> 12) & 0x7 == (reference >> 12) & 0x7
        assert (code >> 7) & 0x1F == R.A0
        assert (code >> 15) & 0x1F == R.A1
        assert (code >> 20) & 0x1F == shamt


@pytest.mark.parametrize(
    "imm_form",
    [rv32zbs.bclri, rv32zbs.bexti, rv32zbs.binvi, rv32zbs.bseti],
)
def test_shift_amount_uses_low_five_bits(imm_form):
    assert imm_form(R.T0, R.T1, 33) == imm_form(R.T0, R.T1, 1)


def test_bset_encoding():
    assert rv32zbs.bset(R.A0, R.A1, R.A2) == 0x28C59533