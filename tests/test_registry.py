"""
Unit Tests for the RISC-V Stub and the Adapter Registry
=======================================================

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from polydisasm.bitwidth import BitWidth
from polydisasm.disassembler import (
    ARCHITECTURES,
    Mos6502,
    RiscV,
    X86,
    Syntax,
    UnsupportedSyntaxError,
    create_disassembler,
)
from polydisasm.errors import (
    Infallible,
    UnimplementedError,
    UnknownArchitectureError,
    UnsupportedOptionError,
    WrongBitWidthError,
)
from polydisasm.options import OutputOptions


class TestRiscV:
    """Tests for the RISC-V stub adapter."""

    @pytest.mark.parametrize("width", [BitWidth.BIT16, BitWidth.BIT32])
    def test_valid_widths_construct(self, width):
        assert RiscV(width).width is width

    @pytest.mark.parametrize("width", [BitWidth.BIT8, BitWidth.BIT64])
    def test_invalid_widths(self, width):
        with pytest.raises(WrongBitWidthError):
            RiscV(width)

    def test_disassemble_unimplemented(self):
        with pytest.raises(UnimplementedError) as exc_info:
            RiscV(BitWidth.BIT32).disassemble(b"\x13\x00\x00\x00", OutputOptions())
        assert str(exc_info.value) == "The implementation has not been done"

    def test_unimplemented_for_empty_buffer(self):
        with pytest.raises(UnimplementedError):
            RiscV(BitWidth.BIT16).disassemble(b"", OutputOptions())

    def test_option_check_comes_first(self):
        with pytest.raises(UnsupportedOptionError):
            RiscV(BitWidth.BIT32).disassemble(b"", OutputOptions().with_cycles(True))

    def test_declares_infallible_engine(self):
        assert RiscV.arch_error is Infallible
        assert Mos6502.arch_error is Infallible


class TestRegistry:
    """Tests for selecting adapters by name."""

    def test_known_architectures(self):
        assert ARCHITECTURES == ("mos6502", "x86", "risc_v")

    def test_create_mos6502(self):
        assert isinstance(create_disassembler("mos6502", BitWidth.BIT8), Mos6502)

    def test_create_x86_with_syntax(self):
        disasm = create_disassembler("x86", BitWidth.BIT32, syntax="att")
        assert isinstance(disasm, X86)
        assert disasm.syntax is Syntax.ATT
        assert disasm.width is BitWidth.BIT32

    def test_create_risc_v(self):
        assert isinstance(create_disassembler("risc_v", BitWidth.BIT16), RiscV)

    def test_name_is_case_insensitive(self):
        assert isinstance(create_disassembler(" X86 ", BitWidth.BIT64), X86)

    def test_syntax_ignored_for_single_syntax_adapters(self):
        assert isinstance(create_disassembler("mos6502", BitWidth.BIT8, "masm"), Mos6502)

    def test_unknown_architecture(self):
        with pytest.raises(UnknownArchitectureError) as exc_info:
            create_disassembler("z80", BitWidth.BIT8)
        assert "mos6502" in str(exc_info.value)

    def test_construction_errors_propagate(self):
        with pytest.raises(WrongBitWidthError):
            create_disassembler("mos6502", BitWidth.BIT16)
        with pytest.raises(UnsupportedSyntaxError):
            create_disassembler("x86", BitWidth.BIT64, "masm")
