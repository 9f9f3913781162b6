# rvencode

Functions that turn RISC-V instructions into their machine-code words.
Each function takes registers and immediates and returns the encoded
instruction as an integer: 32 bits for the base and extension
instructions, 16 bits for the compressed (C) ones. Writing the words
into memory, in little-endian order, is left to the caller.

## Installation

```
pip install rvencode
```

## Modules

| Module              | Instructions                                            |
|---------------------|---------------------------------------------------------|
| `rvencode.rv32i`    | RV32I base set and the usual pseudo-instructions        |
| `rvencode.rv64i`    | what RV64I adds or changes (`ld`, `sd`, `addiw`, `slli`, ...) |
| `rvencode.rv32m`    | multiply and divide                                     |
| `rvencode.rv64m`    | word-sized multiply and divide (`mulw`, `divw`, ...)    |
| `rvencode.rv32c`    | compressed instructions for RV32                        |
| `rvencode.rv64c`    | compressed instructions RV64 adds or changes            |
| `rvencode.rv32zba`  | Zba `sh1add`, `sh2add`, `sh3add`                        |
| `rvencode.rv64zba`  | Zba additions for RV64 (`add_uw`, `slli_uw`, ...)       |
| `rvencode.rv32zbb`  | Zbb basic bit manipulation                              |
| `rvencode.rv64zbb`  | Zbb additions and changes for RV64                      |
| `rvencode.rv32zbc`  | Zbc carry-less multiplication                           |
| `rvencode.rv32zbs`  | Zbs single-bit instructions                             |
| `rvencode.rv64zbs`  | Zbs immediate forms with six-bit shift amounts          |

The RV64 modules hold only the instructions whose encoding differs from,
or is missing in, the RV32 module; for the rest, use the RV32 function.
The Zbc encoders in `rvencode.rv32zbc` are the same on RV64.

Instruction names that clash with Python keywords or builtins carry a
trailing underscore: `and_`, `or_`, `not_`, `max_`, `min_`.

## Registers

`rvencode.types.Register` is an `IntEnum` of the 32 integer registers by
ABI name (`Register.ZERO`, `Register.RA`, `Register.SP`, ... `Register.T6`),
valued by their index. `rvencode.types.CRegister` holds the eight registers
reachable from the three-bit fields of compressed instructions (`S0`, `S1`,
`A0`..`A5`). `str()` of either gives the lower-case name.

- `Register.from_index(i)` and `CRegister.from_c_index(i)` return the
  register with that index, or `None`.
- `CRegister.from_register(reg)` converts a full register and raises
  `CRegisterConversionError` (a `ValueError`) if it has no compressed form.
- `CRegister.to_register()` goes the other way.

## Example

```python
from rvencode import rv32i, rv32c
from rvencode.types import Register, CRegister

word = rv32i.addi(Register.A0, Register.A1, 42)
code = word.to_bytes(4, "little")

half = rv32c.sub(CRegister.A0, CRegister.A1)
code += half.to_bytes(2, "little")
```

## Range checks

The 32-bit encoders raise `ValueError` when an immediate or offset does not
fit its field: 12 signed bits for I- and S-type, 13 for branches, 21 for
`jal`, 20 for `auipc` and the RV64 `lui`, and 20 unsigned bits for the
RV32 `lui`. Shift amounts are not checked; only their low five or six bits
are encoded. The compressed encoders do no range checks either: each
immediate is cut to the bits its fields hold.

## Lower-level pieces

`rvencode.encoding` holds the building blocks the instruction modules use:
`encode(*fields)` packs `(value, width)` pairs most significant first,
`is_signed_nbit_integer(n, value)` tests a range,
`to_i20_i12_imm_pair(imm)` splits a 32-bit offset into an `auipc` upper part
and a sign-extended lower 12-bit part, `Opcode` lists the major opcodes, and
the dataclasses `RType`, `IType`, `SType`, `BType`, `CrType`, `CiType`,
`CaType`, `CbType` and `CjType` each have an `encode()` method.

## Patching offsets

`rvencode.fixup.FixupKind` rewrites the offset of an instruction already
written into a `bytearray`, leaving its other bits alone, so a branch or
jump can be written before its target is known:

```python
from rvencode import rv32i
from rvencode.fixup import FixupKind
from rvencode.types import Register

buf = bytearray(rv32i.beq(Register.A0, Register.A1, 0).to_bytes(4, "little"))
FixupKind.BRANCH.apply(buf, 0, 64)
```

The kinds are `JUMP` (`jal`), `BRANCH` (conditional branches), `C_JUMP`
(`c.j`), `C_BRANCH` (`c.beqz`, `c.bnez`), and `JUMP_FAR` and `LOAD`, which
patch an `auipc` followed by an I-type instruction, splitting a 32-bit
offset between the two. `apply` raises `ValueError` if the offset does not
fit and `IndexError` if the instruction lies outside the buffer.

## What it does not do

rvencode encodes single instructions. It does not parse assembly text,
keep a code buffer, or track labels: recording where each pending
instruction sits and calling `FixupKind.apply` once its target is known is
up to the caller. It has no floating-point, atomic or CSR instructions
beyond `ecall`, `ebreak` and `unimp`, and no decoder.

## Tests

```
pip install rvencode[test]
pytest
```