"""
polydisasm - Pluggable Multi-Architecture Disassembly Service
=============================================================

This package turns a byte buffer, a target bit width and a set of output
options into a listing of human-readable instruction lines, for several
instruction sets behind one interface.

Main Components
---------------
- **disassembler**: the Disassembler interface and architecture adapters
    MOS 6502 (8 bit), x86 (16/32/64 bit, Intel or AT&T), RISC-V (stub)

- **options**: OutputOptions (addresses, stop address, case, cycles, symbols)

- **errors**: DisasmError hierarchy and response classification

- **service**: request envelopes, request handling and a JSON-RPC server

- **cli**: the pdisasm command-line tool

Quick Start
-----------
Disassemble 6502 code:
    >>> from polydisasm import Mos6502, OutputOptions
    >>> Mos6502().disassemble(bytes([0xA9, 0xBD]), OutputOptions())
    ['0000 A9 BD    LDA #$BD']

Pick an adapter by name:
    >>> from polydisasm import BitWidth, create_disassembler
    >>> disasm = create_disassembler("x86", BitWidth.BIT64, syntax="att")

Or use the command-line tools:
    $ pdisasm code.bin --arch x86 --width 64 --syntax att
    $ pdisasm-server

Version History
---------------
1.0.0 - Initial release with MOS 6502 and x86 adapters, RISC-V stub
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from polydisasm.bitwidth import BitWidth
from polydisasm.config import ServiceConfig
from polydisasm.errors import (
    DisasmError,
    UnsupportedOptionError,
    UnimplementedError,
    MissingInfoError,
    WrongBitWidthError,
    ArchError,
    Infallible,
    RequestError,
    UnknownArchitectureError,
    ErrorCategory,
    classify,
)
from polydisasm.options import OutputOptions, ShowAddress, SymbolInfo, Scope
from polydisasm.disassembler import (
    ARCHITECTURES,
    Disassembler,
    Mos6502,
    X86,
    RiscV,
    Syntax,
    X86Error,
    UnsupportedSyntaxError,
    X86EngineError,
    create_disassembler,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Data model
    "BitWidth",
    "OutputOptions",
    "ShowAddress",
    "SymbolInfo",
    "Scope",
    "ServiceConfig",
    # Exception hierarchy
    "DisasmError",
    "UnsupportedOptionError",
    "UnimplementedError",
    "MissingInfoError",
    "WrongBitWidthError",
    "ArchError",
    "Infallible",
    "RequestError",
    "UnknownArchitectureError",
    "ErrorCategory",
    "classify",
    # Adapters
    "ARCHITECTURES",
    "Disassembler",
    "Mos6502",
    "X86",
    "RiscV",
    "Syntax",
    "X86Error",
    "UnsupportedSyntaxError",
    "X86EngineError",
    "create_disassembler",
]
