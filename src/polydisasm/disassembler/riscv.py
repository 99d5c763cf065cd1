"""
RISC-V Disassembler (stub)
==========================

Construction is validated for real (16-bit compressed or 32-bit base
encodings), but decoding has not been written yet: every call that gets
past the option check raises UnimplementedError.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import List

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import Infallible, UnimplementedError, WrongBitWidthError
from polydisasm.options import OutputOptions

from .base import Disassembler


class RiscV(Disassembler):
    """RISC-V disassembler."""

    name = "risc_v"
    arch_error = Infallible
    widths = (BitWidth.BIT16, BitWidth.BIT32)

    def __init__(self, width: BitWidth):
        """
        Construct a RISC-V disassembler, validating its options.

        Raises:
            WrongBitWidthError: If width is not 16 or 32 bit
        """
        if width not in self.widths:
            raise WrongBitWidthError(width)
        self.width = width

    def _disassemble(self, data: bytes, options: OutputOptions) -> List[str]:
        raise UnimplementedError()
