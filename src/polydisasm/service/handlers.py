"""
Disassembly Request Handling
============================

The boundary between callers (JSON-RPC server, CLI) and the adapters.

handle_request() selects and builds the adapter, runs it, and converts any
DisasmError into a classified response whose message is the error's text,
verbatim. Every request is independent: a failure leaves nothing behind
that could affect the next one.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from polydisasm.bitwidth import BitWidth
from polydisasm.config import ServiceConfig
from polydisasm.disassembler import create_disassembler
from polydisasm.errors import DisasmError, ErrorCategory, RequestError, classify
from polydisasm.options import OutputOptions

from .wire import payload_from_wire


logger = logging.getLogger(__name__)


# =============================================================================
# Request / Response Types
# =============================================================================

@dataclass(frozen=True)
class DisassemblyRequest:
    """
    A disassembly request addressed to one architecture.

    Attributes:
        arch: Architecture name ("mos6502", "x86", "risc_v")
        data: Bytes to disassemble
        width: Requested bit width
        syntax: Optional syntax name (None = configured default)
        options: Output formatting options
    """
    arch: str
    data: bytes
    width: BitWidth
    syntax: Optional[str] = None
    options: OutputOptions = field(default_factory=OutputOptions)

    @classmethod
    def from_wire(cls, arch: str, envelope: Mapping[str, Any]) -> "DisassemblyRequest":
        """
        Build a request from an architecture name and a wire envelope.

        Raises:
            RequestError: If the envelope is malformed
        """
        payload = payload_from_wire(envelope)
        return cls(
            arch=arch,
            data=payload.data,
            width=payload.width,
            syntax=payload.syntax,
            options=payload.options,
        )


@dataclass(frozen=True)
class DisassemblyResponse:
    """
    Result of a disassembly request: either lines or a classified error.

    Attributes:
        lines: Listing lines on success, None on failure
        category: Error classification on failure
        message: Error description on failure (verbatim str(error))
    """
    lines: Optional[List[str]] = None
    category: Optional[ErrorCategory] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.category is None

    @property
    def status(self) -> int:
        """HTTP-like status code for the response."""
        return 200 if self.category is None else self.category.status

    @classmethod
    def success(cls, lines: List[str]) -> "DisassemblyResponse":
        return cls(lines=lines)

    @classmethod
    def failure(cls, error: DisasmError) -> "DisassemblyResponse":
        return cls(category=classify(error), message=str(error))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.ok:
            return {"lines": self.lines}
        return {
            "error": self.message,
            "category": str(self.category),
            "status": self.status,
        }


# =============================================================================
# Handler
# =============================================================================

def disassemble_request(
    request: DisassemblyRequest,
    config: Optional[ServiceConfig] = None,
) -> List[str]:
    """
    Run a request and return the lines, raising on failure.

    Raises:
        RequestError: If the buffer exceeds the configured size limit
        DisasmError: Any error raised by the registry or the adapter
    """
    config = config or ServiceConfig()

    syntax = request.syntax if request.syntax is not None else config.default_syntax
    disassembler = create_disassembler(request.arch, request.width, syntax)

    if len(request.data) > config.max_input_bytes:
        raise RequestError(
            f"Input too large: {len(request.data)} bytes "
            f"(limit {config.max_input_bytes})"
        )

    logger.debug(
        "Disassembling %d bytes as %s (%s)", len(request.data), request.arch, request.width
    )
    return disassembler.disassemble(request.data, request.options)


def handle_request(
    request: DisassemblyRequest,
    config: Optional[ServiceConfig] = None,
) -> DisassemblyResponse:
    """
    Run a request and classify the outcome.

    Args:
        request: The request to run
        config: Service configuration (defaults if omitted)

    Returns:
        DisassemblyResponse with lines, or with category and message
    """
    try:
        lines = disassemble_request(request, config)
    except DisasmError as e:
        response = DisassemblyResponse.failure(e)
        logger.warning(
            "%s request failed (%s): %s", request.arch, response.category, response.message
        )
        return response
    return DisassemblyResponse.success(lines)


def handle_envelope(
    arch: str,
    envelope: Mapping[str, Any],
    config: Optional[ServiceConfig] = None,
) -> DisassemblyResponse:
    """Decode a wire envelope and handle it; malformed envelopes are BAD_REQUEST."""
    try:
        request = DisassemblyRequest.from_wire(arch, envelope)
    except RequestError as e:
        logger.warning("Rejected %s request: %s", arch, e)
        return DisassemblyResponse.failure(e)
    return handle_request(request, config)
