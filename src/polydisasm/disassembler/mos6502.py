"""
MOS 6502 Disassembler
=====================

Disassembles MOS 6502 machine code into a listing in the classic monitor
format, with address and raw bytes in front of each instruction:

    0000 A9 BD    LDA #$BD
    0002 A0 BD    LDY #$BD
    0004 20 28 BA JSR $BA28

Architecture:
    - 8-bit data bus, 16-bit address bus (addresses wrap at $FFFF)
    - Little-endian operands
    - Fixed opcode table, 1 to 3 byte instructions

Output Rules:
    - Operands use Motorola-style hex ($BD, #$BD) and no space after the
      index comma ($1234,X / ($10),Y)
    - BRK is a one-byte instruction
    - Upper case is the native form; lower case folds the whole line,
      addresses and hex digits included
    - The stop address is inclusive: an instruction starting exactly at
      ``stop_at`` is still listed
    - Bytes that do not start a valid instruction are listed as data:
      "0000 7F" with addresses, ".BYTE $7F" without

The decoding engine cannot fail, so this adapter never raises an
architecture-specific error.

Usage:
    disasm = Mos6502()
    lines = disasm.disassemble(bytes([0xA9, 0xBD]), OutputOptions())

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import replace
from typing import Iterator, List

import capstone

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import Infallible, WrongBitWidthError
from polydisasm.options import OutputOptions

from .base import Disassembler
from .engine import DecodedItem, create_engine, decode_one


# Native address width of the 6502
ADDRESS_MASK = 0xFFFF

MAX_INSTRUCTION_SIZE = 3

BRK_OPCODE = 0x00

# Raw byte column: up to 3 bytes "XX XX XX"
BYTES_COLUMN_WIDTH = 8


class Mos6502(Disassembler):
    """
    Disassembler for MOS 6502 machine code.

    Only the 8-bit width is meaningful for this architecture; it is the
    default and any other width is rejected.
    """

    name = "mos6502"
    arch_error = Infallible
    widths = (BitWidth.BIT8,)

    def __init__(self, width: BitWidth = BitWidth.BIT8):
        """
        Initialize the disassembler.

        Args:
            width: Architecture bit width (must be BitWidth.BIT8)

        Raises:
            WrongBitWidthError: If width is not 8 bit
        """
        if width not in self.widths:
            raise WrongBitWidthError(width)
        self.width = width

    def _disassemble(self, data: bytes, options: OutputOptions) -> List[str]:
        show_address = options.address.enabled
        # Without addresses the engine still counts from zero; stop_at uses that
        base = options.address.offset & ADDRESS_MASK if show_address else 0

        engine = create_engine(
            capstone.CS_ARCH_MOS65XX,
            capstone.CS_MODE_MOS65XX_6502,
            capstone.CS_OPT_SYNTAX_MOTOROLA,
        )

        lines = []
        for item in self.decode(engine, data, base):
            address = item.address & ADDRESS_MASK
            if options.stop_at is not None and address > options.stop_at:
                break

            line = self.format_line(item, address, show_address)
            # TODO: substitute options.symbol_table names once supports_symbols is enabled
            lines.append(line.upper() if options.upper_case else line.lower())

        return lines

    @staticmethod
    def decode(engine: capstone.Cs, data: bytes, base: int = 0) -> Iterator[DecodedItem]:
        """
        Decode ``data`` one instruction at a time.

        BRK is listed as a one-byte instruction (capstone consumes the
        signature byte after it as an operand), and indexed operands are
        written without a space after the comma: ``($01,X)``.

        Args:
            engine: capstone MOS65XX handle
            data: Machine code
            base: Address of the first byte

        Yields:
            DecodedItem for each instruction or undecodable byte
        """
        offset = 0
        while offset < len(data):
            address = base + offset
            if data[offset] == BRK_OPCODE:
                item = DecodedItem(address=address, raw_bytes=data[offset:offset + 1],
                                   mnemonic="brk")
            else:
                item = decode_one(engine, data[offset:offset + MAX_INSTRUCTION_SIZE], address)
                if item.op_str:
                    item = replace(item, op_str=item.op_str.replace(", ", ","))
            yield item
            offset += len(item.raw_bytes)

    @staticmethod
    def format_line(item: DecodedItem, address: int, show_address: bool) -> str:
        """
        Format a decoded item as one listing line, before case folding.

        Args:
            item: Decoded instruction or data byte
            address: 16-bit address of the item
            show_address: Prefix the address and raw bytes

        Returns:
            The listing line without a line terminator
        """
        if not show_address:
            if item.is_data:
                return f".BYTE ${item.raw_bytes[0]:02X}"
            return item.text

        hex_bytes = " ".join(f"{b:02X}" for b in item.raw_bytes)
        if item.is_data:
            return f"{address:04X} {hex_bytes}"
        return f"{address:04X} {hex_bytes:<{BYTES_COLUMN_WIDTH}} {item.text}"
