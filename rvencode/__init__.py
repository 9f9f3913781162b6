"""Encoders for RISC-V base, compressed, multiply and bit-manipulation instructions."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "encoding",
    "fixup",
    "rv32i",
    "rv32m",
    "rv32c",
    "rv32zba",
    "rv32zbb",
    "rv32zbc",
    "rv32zbs",
    "rv64i",
    "rv64m",
    "rv64c",
    "rv64zba",
    "rv64zbb",
    "rv64zbs",
]