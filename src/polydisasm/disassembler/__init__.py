"""
polydisasm Disassembler Module
==============================

This module provides the architecture adapters behind the common
Disassembler interface:
- MOS 6502 (8 bit, fixed opcode table)
- x86 (16/32/64 bit, Intel or AT&T syntax)
- RISC-V (16/32 bit, decoding not yet implemented)

Adapters can be built directly, or by name through the registry, which is
what the request boundary does:

    from polydisasm.disassembler import create_disassembler

    disasm = create_disassembler("x86", BitWidth.BIT64, syntax="att")
    lines = disasm.disassemble(code, OutputOptions())

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Callable, Dict, Optional

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import UnknownArchitectureError

from .base import Disassembler
from .mos6502 import Mos6502
from .riscv import RiscV
from .x86 import X86, Syntax, UnsupportedSyntaxError, X86EngineError, X86Error


# Each factory applies its adapter's construction contract; the syntax
# argument is ignored by architectures with a single syntax.
_FACTORIES: Dict[str, Callable[[BitWidth, Optional[str]], Disassembler]] = {
    Mos6502.name: lambda width, syntax: Mos6502(width),
    X86.name: lambda width, syntax: X86.from_names(syntax, width),
    RiscV.name: lambda width, syntax: RiscV(width),
}

ARCHITECTURES = tuple(_FACTORIES)


def create_disassembler(
    arch: str,
    width: BitWidth,
    syntax: Optional[str] = None,
) -> Disassembler:
    """
    Build the adapter registered under ``arch``.

    Args:
        arch: Architecture name ("mos6502", "x86", "risc_v")
        width: Requested bit width
        syntax: Syntax name for adapters that support several

    Returns:
        A validated Disassembler instance

    Raises:
        UnknownArchitectureError: If no adapter is registered under ``arch``
        WrongBitWidthError: If the width is not supported by the adapter
        UnsupportedSyntaxError: If the x86 syntax name is not recognised
    """
    factory = _FACTORIES.get(arch.strip().lower())
    if factory is None:
        raise UnknownArchitectureError(arch, list(ARCHITECTURES))
    return factory(width, syntax)


__all__ = [
    "ARCHITECTURES",
    "Disassembler",
    "Mos6502",
    "RiscV",
    "Syntax",
    "UnsupportedSyntaxError",
    "X86",
    "X86EngineError",
    "X86Error",
    "create_disassembler",
]
