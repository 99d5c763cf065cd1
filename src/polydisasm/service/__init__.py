"""
polydisasm Service Boundary
===========================

Everything between a caller and the adapters:

- **wire**: request envelope and OutputOptions JSON shapes
- **handlers**: request execution and error classification
- **server**: JSON-RPC 2.0 stdio server exposing the handlers as tools

Usage:
    from polydisasm.service import handle_envelope

    response = handle_envelope("mos6502", {"bytes": [0xEA], "width": 8})
    print(response.to_dict())

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from .handlers import (
    DisassemblyRequest,
    DisassemblyResponse,
    disassemble_request,
    handle_envelope,
    handle_request,
)
from .wire import (
    Payload,
    options_from_wire,
    options_to_wire,
    payload_from_wire,
    symbol_key_from_wire,
    symbol_key_to_wire,
)

__all__ = [
    "DisassemblyRequest",
    "DisassemblyResponse",
    "Payload",
    "disassemble_request",
    "handle_envelope",
    "handle_request",
    "options_from_wire",
    "options_to_wire",
    "payload_from_wire",
    "symbol_key_from_wire",
    "symbol_key_to_wire",
]
