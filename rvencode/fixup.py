"""Patching of branch and load offsets into already emitted code."""

from __future__ import annotations

import enum

from rvencode.encoding import (
    BType,
    CbType,
    CjType,
    IType,
    encode,
    is_signed_nbit_integer,
    to_i20_i12_imm_pair,
)


def _require_signed(n: int, value: int) -> None:
    if not is_signed_nbit_integer(n, value):
        raise ValueError(f"offset {value} does not fit in {n} signed bits")


def _patch(instruction: int, encoder, offset: int) -> int:
    mask = encoder(-1)
    return (instruction & ~mask) | encoder(offset)


def _jump_offset(offset: int) -> int:
    return encode(
        (offset >> 20, 1),
        (offset >> 1, 10),
        (offset >> 11, 1),
        (offset >> 12, 8),
        (0, 12),
    )


def _branch_offset(offset: int) -> int:
    return BType(offset=offset).encode()


def _auipc_offset(offset: int) -> int:
    return encode((offset, 20), (0, 5), (0, 7))


def _itype_offset(offset: int) -> int:
    return IType(imm12=offset).encode()


def _c_jump_offset(offset: int) -> int:
    return CjType(offset=offset).encode()


def _c_branch_offset(offset: int) -> int:
    return CbType(offset=offset).encode()


def _check_span(buffer, start: int, size: int) -> None:
    if start < 0 or start + size > len(buffer):
        raise IndexError(f"{size} bytes at {start} lie outside a buffer of {len(buffer)} bytes")


def _read(buffer, start: int, size: int) -> int:
    return int.from_bytes(buffer[start:start + size], "little")


def _write(buffer, start: int, size: int, value: int) -> None:
    buffer[start:start + size] = value.to_bytes(size, "little")


class FixupKind(enum.Enum):
    """How a pending label reference is written into code."""

    JUMP = enum.auto()
    BRANCH = enum.auto()
    C_JUMP = enum.auto()
    C_BRANCH = enum.auto()
    JUMP_FAR = enum.auto()
    LOAD = enum.auto()

    def apply(self, buffer: bytearray, start: int, offset: int) -> None:
        """Write offset into the instruction(s) at buffer[start:] in place.

        Raises ValueError if the offset does not fit the instruction and
        IndexError if the instruction lies outside the buffer.
        """
        if self in (FixupKind.JUMP, FixupKind.BRANCH):
            if self is FixupKind.JUMP:
                _require_signed(21, offset)
                encoder = _jump_offset
            else:
                _require_signed(13, offset)
                encoder = _branch_offset
            _check_span(buffer, start, 4)
            _write(buffer, start, 4, _patch(_read(buffer, start, 4), encoder, offset))
        elif self in (FixupKind.C_JUMP, FixupKind.C_BRANCH):
            if self is FixupKind.C_JUMP:
                _require_signed(12, offset)
                encoder = _c_jump_offset
            else:
                _require_signed(9, offset)
                encoder = _c_branch_offset
            _check_span(buffer, start, 2)
            _write(buffer, start, 2, _patch(_read(buffer, start, 2), encoder, offset))
        else:
            _require_signed(32, offset)
            upper, lower = to_i20_i12_imm_pair(offset)
            _check_span(buffer, start, 8)
            auipc = _read(buffer, start, 4)
            _write(buffer, start, 4, _patch(auipc, _auipc_offset, upper))
            itype = _read(buffer, start + 4, 4)
            _write(buffer, start + 4, 4, _patch(itype, _itype_offset, lower))