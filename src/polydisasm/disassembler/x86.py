"""
x86 Disassembler
================

Disassembles 16, 32 and 64-bit x86 machine code in either Intel or AT&T
syntax:

    0x00000000 PUSH RBP                 (Intel)
    0x00000000 PUSHQ %RBP               (AT&T)

Instructions are variable length; the configured bit width selects the
decoding mode (operand and address sizes), not the width of the displayed
address, which is always eight hex digits after a "0x" prefix.

Output Rules:
    - The case preference is applied by the formatter to the whole
      instruction text, numeric literals included; the "0x" hex prefix
      itself is always lower case
    - The stop address is exclusive and compared against the instruction
      pointer before the display offset is added
    - Displayed address = instruction pointer + ShowAddress offset
    - Bytes that do not start a valid instruction are emitted as a data
      directive ("db 0x0f" / ".byte 0x0f") and decoding resumes after them

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import re
from enum import Enum
from typing import List, Optional

import capstone

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import ArchError, ErrorCategory, WrongBitWidthError
from polydisasm.options import OutputOptions

from .base import Disassembler
from .engine import DecodedItem, create_engine, decode_stream


logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class X86Error(ArchError):
    """Base exception for x86 adapter errors."""
    pass


class UnsupportedSyntaxError(X86Error):
    """
    The requested syntax name is not recognised.

    Attributes:
        syntax: The syntax string exactly as requested
    """
    category = ErrorCategory.BAD_REQUEST

    def __init__(self, syntax: str):
        self.syntax = syntax
        super().__init__(f"Unsupported syntax: {syntax}")


class X86EngineError(X86Error):
    """The capstone engine reported a failure."""
    message = "Capstone disassembler error"
    category = ErrorCategory.INTERNAL_ERROR


# =============================================================================
# Syntax
# =============================================================================

class Syntax(Enum):
    """Output disassembly syntax."""
    INTEL = "intel"
    ATT = "att"

    @classmethod
    def parse(cls, text: str) -> "Syntax":
        """
        Parse a syntax name (case-insensitive).

        Accepts "intel", and "att" or its alias "at&t".

        Raises:
            UnsupportedSyntaxError: If the name is not recognised
        """
        syntax = _SYNTAX_NAMES.get(text.lower())
        if syntax is None:
            raise UnsupportedSyntaxError(text)
        return syntax

    @property
    def engine_option(self) -> int:
        """capstone CS_OPT_SYNTAX_* value for this syntax."""
        if self is Syntax.ATT:
            return capstone.CS_OPT_SYNTAX_ATT
        return capstone.CS_OPT_SYNTAX_INTEL


_SYNTAX_NAMES = {
    "intel": Syntax.INTEL,
    "att": Syntax.ATT,
    "at&t": Syntax.ATT,
}

_HEX_PREFIX = re.compile(r"\b0X")

_ENGINE_MODES = {
    BitWidth.BIT16: capstone.CS_MODE_16,
    BitWidth.BIT32: capstone.CS_MODE_32,
    BitWidth.BIT64: capstone.CS_MODE_64,
}


# =============================================================================
# Formatter
# =============================================================================

class X86Formatter:
    """
    Renders decoded items in one syntax and one letter case.

    Case is a formatter setting rather than a pass over finished lines, so
    mnemonics, registers and numeric literals all follow it.
    """

    def __init__(self, syntax: Syntax, upper_case: bool = True):
        self.syntax = syntax
        self.upper_case = upper_case

    def _case(self, text: str) -> str:
        if self.upper_case:
            # Hex prefix stays "0x", as in the address column
            return _HEX_PREFIX.sub("0x", text.upper())
        return text.lower()

    def format(self, item: DecodedItem) -> str:
        """Format an instruction or data byte."""
        if item.is_data:
            directive = ".byte" if self.syntax is Syntax.ATT else "db"
            return self._case(f"{directive} 0x{item.raw_bytes[0]:02x}")
        return self._case(item.text)

    def format_address(self, address: int) -> str:
        """Format a displayed address: "0x" and eight hex digits."""
        digits = f"{address:08X}" if self.upper_case else f"{address:08x}"
        return f"0x{digits}"


# =============================================================================
# x86 Disassembler
# =============================================================================

class X86(Disassembler):
    """
    Disassembler for x86 machine code.

    Attributes:
        syntax: Output syntax (Intel or AT&T)
        width: Decoding mode (16, 32 or 64 bit)
    """

    name = "x86"
    arch_error = X86Error
    widths = (BitWidth.BIT16, BitWidth.BIT32, BitWidth.BIT64)

    def __init__(self, syntax: Syntax = Syntax.INTEL, width: BitWidth = BitWidth.BIT64):
        """
        Construct an x86 disassembler, validating its options.

        Args:
            syntax: Output syntax
            width: Decoding mode

        Raises:
            WrongBitWidthError: If width is not 16, 32 or 64 bit
        """
        if width not in self.widths:
            raise WrongBitWidthError(width)
        self.syntax = syntax
        self.width = width

    @classmethod
    def from_names(cls, syntax: Optional[str], width: BitWidth) -> "X86":
        """
        Construct from a syntax name as found in requests.

        The width is validated before the syntax; None selects Intel.

        Raises:
            WrongBitWidthError: If width is not supported
            UnsupportedSyntaxError: If the syntax name is not recognised
        """
        if width not in cls.widths:
            raise WrongBitWidthError(width)
        parsed = Syntax.parse(syntax) if syntax is not None else Syntax.INTEL
        return cls(parsed, width)

    def _disassemble(self, data: bytes, options: OutputOptions) -> List[str]:
        formatter = X86Formatter(self.syntax, options.upper_case)
        address = options.address

        lines = []
        try:
            engine = create_engine(
                capstone.CS_ARCH_X86, _ENGINE_MODES[self.width], self.syntax.engine_option
            )
            for item in decode_stream(engine, data):
                if options.stop_at is not None and item.address >= options.stop_at:
                    break

                text = formatter.format(item)
                if address.enabled:
                    text = f"{formatter.format_address(item.address + address.offset)} {text}"
                lines.append(text)
        except capstone.CsError as e:
            logger.debug("capstone failure: %s", e)
            raise X86EngineError(f"Capstone disassembler error: {e}") from e

        return lines
