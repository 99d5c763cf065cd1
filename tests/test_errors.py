"""
Unit Tests for the Error Hierarchy
==================================

Tests for DisasmError variants, their messages and classification.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import (
    ArchError,
    DisasmError,
    ErrorCategory,
    Infallible,
    MissingInfoError,
    RequestError,
    UnimplementedError,
    UnknownArchitectureError,
    UnsupportedOptionError,
    WrongBitWidthError,
    classify,
)
from polydisasm.disassembler.x86 import UnsupportedSyntaxError, X86EngineError, X86Error


class TestErrorMessages:
    """Tests for the human-readable messages of each variant."""

    def test_unsupported_option(self):
        assert str(UnsupportedOptionError()) == "Unsupported disassembler option"

    def test_unimplemented(self):
        assert str(UnimplementedError()) == "The implementation has not been done"

    def test_missing_info(self):
        assert str(MissingInfoError()) == "Missing disassembler option"

    def test_wrong_bit_width(self):
        error = WrongBitWidthError(BitWidth.BIT16)
        assert str(error) == "Invalid architecture bit width: 16 bit"
        assert error.width is BitWidth.BIT16

    def test_unsupported_syntax(self):
        error = UnsupportedSyntaxError("motorola")
        assert str(error) == "Unsupported syntax: motorola"
        assert error.syntax == "motorola"

    def test_explicit_message_overrides_default(self):
        assert str(X86EngineError("Capstone disassembler error: boom")).endswith("boom")

    def test_unknown_architecture_lists_known(self):
        error = UnknownArchitectureError("z80", ["mos6502", "x86"])
        assert str(error) == "Unknown architecture: z80 (supported: mos6502, x86)"


class TestHierarchy:
    """Tests for the exception class hierarchy."""

    @pytest.mark.parametrize("error", [
        UnsupportedOptionError(),
        UnimplementedError(),
        MissingInfoError(),
        WrongBitWidthError(BitWidth.BIT8),
        UnsupportedSyntaxError("x"),
        RequestError("bad"),
    ])
    def test_all_are_disasm_errors(self, error):
        assert isinstance(error, DisasmError)

    def test_x86_errors_are_arch_errors(self):
        assert issubclass(X86Error, ArchError)
        assert issubclass(UnsupportedSyntaxError, X86Error)
        assert issubclass(X86EngineError, X86Error)

    def test_infallible_cannot_be_constructed(self):
        """The marker type for engines that cannot fail is uninhabited."""
        assert issubclass(Infallible, ArchError)
        with pytest.raises(TypeError):
            Infallible()


class TestClassify:
    """Tests for mapping errors to response categories."""

    @pytest.mark.parametrize("error, category", [
        (UnsupportedOptionError(), ErrorCategory.NOT_IMPLEMENTED),
        (UnimplementedError(), ErrorCategory.NOT_IMPLEMENTED),
        (MissingInfoError(), ErrorCategory.BAD_REQUEST),
        (WrongBitWidthError(BitWidth.BIT64), ErrorCategory.BAD_REQUEST),
        (UnsupportedSyntaxError("x"), ErrorCategory.BAD_REQUEST),
        (X86EngineError(), ErrorCategory.INTERNAL_ERROR),
        (RequestError("bad"), ErrorCategory.BAD_REQUEST),
        (UnknownArchitectureError("z80"), ErrorCategory.BAD_REQUEST),
    ])
    def test_category(self, error, category):
        assert classify(error) is category

    def test_status_codes(self):
        assert ErrorCategory.NOT_IMPLEMENTED.status == 501
        assert ErrorCategory.BAD_REQUEST.status == 400
        assert ErrorCategory.INTERNAL_ERROR.status == 500

    def test_category_str(self):
        assert str(ErrorCategory.NOT_IMPLEMENTED) == "not_implemented"
