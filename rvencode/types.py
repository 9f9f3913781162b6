"""Integer and compressed register sets."""

from __future__ import annotations

import enum
from typing import Optional


class Register(enum.IntEnum):
    """A general purpose integer register, valued by its index."""

    ZERO = 0
    RA = 1
    SP = 2
    GP = 3
    TP = 4
    T0 = 5
    T1 = 6
    T2 = 7
    S0 = 8
    S1 = 9
    A0 = 10
    A1 = 11
    A2 = 12
    A3 = 13
    A4 = 14
    A5 = 15
    A6 = 16
    A7 = 17
    S2 = 18
    S3 = 19
    S4 = 20
    S5 = 21
    S6 = 22
    S7 = 23
    S8 = 24
    S9 = 25
    S10 = 26
    S11 = 27
    T3 = 28
    T4 = 29
    T5 = 30
    T6 = 31

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def from_index(cls, index: int) -> Optional["Register"]:
        """Return the register with the given index, or None if there is none."""
        try:
            return cls(index)
        except ValueError:
            return None


class CRegisterConversionError(ValueError):
    """Raised when a register has no compressed encoding."""

    def __init__(self, register: Register) -> None:
        super().__init__(f"could not convert {register.name} to CRegister")
        self.register = register


class CRegister(enum.IntEnum):
    """A register reachable by the 3-bit fields of compressed instructions."""

    S0 = 0
    S1 = 1
    A0 = 2
    A1 = 3
    A2 = 4
    A3 = 5
    A4 = 6
    A5 = 7

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def from_c_index(cls, index: int) -> Optional["CRegister"]:
        """Return the compressed register with the given index, or None."""
        try:
            return cls(index)
        except ValueError:
            return None

    @classmethod
    def from_register(cls, reg: Register) -> "CRegister":
        """Convert a full register; raise CRegisterConversionError if impossible."""
        reg = Register(reg)
        try:
            return cls[reg.name]
        except KeyError:
            raise CRegisterConversionError(reg) from None

    def to_register(self) -> Register:
        """Return the full register this compressed register names."""
        return Register[self.name]