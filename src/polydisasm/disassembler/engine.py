"""
Capstone Engine Helpers
=======================

Thin helpers around the capstone decoding engine shared by the adapters.

Capstone stops at the first byte sequence it cannot decode. The adapters
want a best-effort listing of the whole buffer instead, so decode_stream()
resumes one byte later and reports the skipped byte as data.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from typing import Iterator, Optional

import capstone


@dataclass(frozen=True)
class DecodedItem:
    """
    One entry of a decoded stream.

    Attributes:
        address: Address capstone was given for the first byte
        raw_bytes: Bytes covered by this entry
        mnemonic: Instruction mnemonic, or None for an undecodable byte
        op_str: Operand text as rendered by the engine (may be empty)
    """
    address: int
    raw_bytes: bytes
    mnemonic: Optional[str] = None
    op_str: str = ""

    @property
    def is_data(self) -> bool:
        return self.mnemonic is None

    @property
    def text(self) -> str:
        """Mnemonic and operands joined as the engine renders them."""
        if self.mnemonic is None:
            return ""
        if self.op_str:
            return f"{self.mnemonic} {self.op_str}"
        return self.mnemonic


def create_engine(arch: int, mode: int, syntax: Optional[int] = None) -> capstone.Cs:
    """
    Create a capstone handle.

    Args:
        arch: capstone CS_ARCH_* constant
        mode: capstone CS_MODE_* constant
        syntax: Optional capstone CS_OPT_SYNTAX_* constant

    Raises:
        capstone.CsError: If the engine does not support the combination
    """
    engine = capstone.Cs(arch, mode)
    if syntax is not None:
        engine.syntax = syntax
    return engine


def decode_one(engine: capstone.Cs, data: bytes, address: int) -> DecodedItem:
    """
    Decode the single instruction at the start of ``data``.

    Args:
        engine: capstone handle to decode with
        data: Machine code starting at the instruction (may run past it)
        address: Address of the first byte

    Returns:
        The decoded instruction, or a one-byte data item if the engine
        could not decode it
    """
    for _, size, mnemonic, op_str in engine.disasm_lite(data, address, 1):
        return DecodedItem(
            address=address, raw_bytes=data[:size], mnemonic=mnemonic, op_str=op_str
        )
    return DecodedItem(address=address, raw_bytes=data[:1])


def decode_stream(engine: capstone.Cs, data: bytes, base: int = 0) -> Iterator[DecodedItem]:
    """
    Decode every byte of ``data`` in address order.

    Args:
        engine: capstone handle to decode with
        data: Machine code
        base: Address of the first byte

    Yields:
        DecodedItem for each instruction, and a one-byte data item for each
        byte the engine could not decode (unknown opcode, truncated tail)
    """
    offset = 0
    while offset < len(data):
        for _, size, mnemonic, op_str in engine.disasm_lite(data[offset:], base + offset):
            yield DecodedItem(
                address=base + offset,
                raw_bytes=data[offset:offset + size],
                mnemonic=mnemonic,
                op_str=op_str,
            )
            offset += size

        if offset < len(data):
            yield DecodedItem(address=base + offset, raw_bytes=data[offset:offset + 1])
            offset += 1
