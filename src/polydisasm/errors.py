"""
Disassembly Error Hierarchy
===========================

This module defines the exception hierarchy shared by every disassembler
adapter and by the request boundary. All exceptions inherit from
DisasmError, allowing callers to catch every disassembly failure with a
single except clause if desired.

Exception Hierarchy
-------------------
DisasmError (base)
├── UnsupportedOptionError - an output option the adapter cannot honour
├── UnimplementedError - the adapter exists but performs no decoding
├── MissingInfoError - a required construction parameter was absent
├── WrongBitWidthError - bit width outside the architecture's subset
├── ArchError (architecture-specific failures)
│   ├── Infallible - marker for engines that cannot fail (never raised)
│   └── X86Error (see polydisasm.disassembler.x86)
│       ├── UnsupportedSyntaxError - unknown syntax name
│       └── X86EngineError - the decoding engine failed
└── RequestError - malformed request envelope (boundary only)
    └── UnknownArchitectureError - no adapter registered under that name

Precedence
----------
When several conditions hold at once, the adapters report them in this
order: unsupported option, unimplemented, missing info, wrong bit width,
architecture-specific. Construction errors (bit width, syntax) are raised
by the adapter constructor, so they surface before any buffer is read.

Classification
--------------
classify() maps every error onto an ErrorCategory, which the boundary uses
to choose a response shape. Architecture errors carry their own category.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from enum import Enum
from typing import Optional

from polydisasm.bitwidth import BitWidth


# =============================================================================
# Response Categories
# =============================================================================

class ErrorCategory(Enum):
    """
    Response category for a failed disassembly.

    Each member carries the HTTP-like status code used by the boundary
    when it needs a numeric code.
    """
    NOT_IMPLEMENTED = 501
    BAD_REQUEST = 400
    INTERNAL_ERROR = 500

    @property
    def status(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name.lower()


# =============================================================================
# Base Exception Class
# =============================================================================

class DisasmError(Exception):
    """
    Base exception for all disassembly errors.

    Subclasses define a fixed ``message`` (used when no explicit text is
    given) and a ``category`` that classify() reports for them:

        try:
            lines = disassembler.disassemble(data, options)
        except DisasmError as e:
            print(f"{classify(e)}: {e}")
    """
    message = "Disassembly failed"
    category = ErrorCategory.INTERNAL_ERROR

    def __init__(self, message: Optional[str] = None):
        super().__init__(message if message is not None else self.message)


# =============================================================================
# Generic Variants
# =============================================================================

class UnsupportedOptionError(DisasmError):
    """
    A requested output option is not supported by the target adapter.

    Raised before any decoding work starts, so no partial output exists.
    Today every adapter rejects symbol tables and cycle display.
    """
    message = "Unsupported disassembler option"
    category = ErrorCategory.NOT_IMPLEMENTED


class UnimplementedError(DisasmError):
    """
    The decode operation is not implemented for this architecture.

    Distinct from UnsupportedOptionError: the adapter exists and accepted
    its configuration, but it performs no work.
    """
    message = "The implementation has not been done"
    category = ErrorCategory.NOT_IMPLEMENTED


class MissingInfoError(DisasmError):
    """
    A required piece of construction information was absent.

    Reserved for adapters that need mandatory parameters.
    """
    message = "Missing disassembler option"
    category = ErrorCategory.BAD_REQUEST


class WrongBitWidthError(DisasmError):
    """
    The requested bit width is not supported by the architecture.

    Attributes:
        width: The rejected BitWidth
    """
    category = ErrorCategory.BAD_REQUEST

    def __init__(self, width: BitWidth):
        self.width = width
        super().__init__(f"Invalid architecture bit width: {width}")


# =============================================================================
# Architecture-Specific Errors
# =============================================================================

class ArchError(DisasmError):
    """
    Base for failures surfaced by an architecture's decoding engine.

    Each architecture defines its own subclasses and sets ``category`` on
    them; the boundary delegates classification to that attribute.
    """
    pass


class Infallible(ArchError):
    """
    Architecture error type for engines that cannot fail.

    Adapters declare ``arch_error = Infallible`` to state that no
    architecture-specific failure exists. The class cannot be instantiated.
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError("Infallible errors cannot be constructed")


# =============================================================================
# Boundary Errors
# =============================================================================

class RequestError(DisasmError):
    """
    Malformed request envelope.

    Raised by the wire codec and the request handler when the incoming
    payload cannot be turned into a valid disassembly request.
    """
    category = ErrorCategory.BAD_REQUEST


class UnknownArchitectureError(RequestError):
    """No adapter is registered under the requested architecture name."""

    def __init__(self, name: str, known: Optional[list[str]] = None):
        self.name = name
        self.known = known or []
        text = f"Unknown architecture: {name}"
        if self.known:
            text += f" (supported: {', '.join(self.known)})"
        super().__init__(text)


# =============================================================================
# Classification
# =============================================================================

def classify(error: DisasmError) -> ErrorCategory:
    """
    Map a disassembly error to its response category.

    UnsupportedOptionError and UnimplementedError map to NOT_IMPLEMENTED,
    WrongBitWidthError and MissingInfoError to BAD_REQUEST. Architecture
    errors report whatever category their own class declares.

    Args:
        error: The error to classify

    Returns:
        The ErrorCategory for the response
    """
    return error.category
