"""
Request Envelope Wire Format
============================

Converts between JSON-compatible dictionaries and the core value types.
This is the only module that knows about the wire shapes; the core works
with OutputOptions and SymbolInfo directly.

Request envelope:

    {
        "bytes": [169, 189, 160, 189],        # or "a9bda0bd"
        "width": "Bit8",                       # or 8
        "syntax": "att",                       # optional
        "format": {                            # optional, all fields optional
            "address": {"Start": 0},           # or "None"
            "stop_at": null,
            "upper_case": true,
            "cycles": false,
            "symbol_table": {"{\\"address\\": 47656, \\"scope\\": \\"Global\\"}": "SUB"}
        }
    }

Symbol table keys are composite (address, scope) values, which JSON cannot
use as object keys, so each key travels as a JSON-encoded string.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from polydisasm.bitwidth import BitWidth
from polydisasm.errors import RequestError
from polydisasm.options import OutputOptions, Scope, ShowAddress, SymbolInfo

from .parsing import parse_byte_buffer, parse_integer


# =============================================================================
# Symbol Table Keys
# =============================================================================

def symbol_key_to_wire(symbol: SymbolInfo) -> str:
    """Encode a SymbolInfo as a JSON string usable as an object key."""
    return json.dumps({"address": symbol.address, "scope": symbol.scope.value})


def symbol_key_from_wire(key: str) -> SymbolInfo:
    """
    Decode a JSON-encoded SymbolInfo key.

    Raises:
        RequestError: If the key is not a valid encoded SymbolInfo
    """
    try:
        data = json.loads(key)
        address = parse_integer(data["address"], "symbol address")
        scope = Scope(data["scope"])
    except (ValueError, TypeError, KeyError) as e:
        raise RequestError(f"Invalid symbol table key {key!r}: {e}") from e
    return SymbolInfo(address, scope)


# =============================================================================
# Output Options
# =============================================================================

def address_to_wire(address: ShowAddress) -> Any:
    if not address.enabled:
        return "None"
    return {"Start": address.offset}


def address_from_wire(value: Any) -> ShowAddress:
    """
    Decode an address mode: "None" or {"Start": N}.

    Raises:
        RequestError: If the value is not a valid address mode
    """
    if value is None or value == "None":
        return ShowAddress.none()
    if isinstance(value, dict) and set(value) == {"Start"}:
        try:
            return ShowAddress.start(parse_integer(value["Start"], "address.Start"))
        except ValueError as e:
            raise RequestError(str(e)) from e
    raise RequestError(f"Invalid address mode: {value!r}")


def options_to_wire(options: OutputOptions) -> Dict[str, Any]:
    """Convert OutputOptions to its JSON-compatible form."""
    table = None
    if options.symbol_table is not None:
        table = {
            symbol_key_to_wire(symbol): name
            for symbol, name in sorted(options.symbol_table.items())
        }
    return {
        "address": address_to_wire(options.address),
        "stop_at": options.stop_at,
        "upper_case": options.upper_case,
        "cycles": options.cycles,
        "symbol_table": table,
    }


def options_from_wire(data: Optional[Mapping[str, Any]]) -> OutputOptions:
    """
    Build OutputOptions from its JSON-compatible form.

    Missing fields take the OutputOptions defaults.

    Raises:
        RequestError: If any field is malformed
    """
    if data is None:
        return OutputOptions()
    if not isinstance(data, Mapping):
        raise RequestError(f"format: expected object, got {type(data).__name__}")

    options = OutputOptions()

    if "address" in data:
        options = options.with_addresses(address_from_wire(data["address"]))

    if data.get("stop_at") is not None:
        try:
            options = options.with_stop(parse_integer(data["stop_at"], "stop_at"))
        except ValueError as e:
            raise RequestError(str(e)) from e

    for flag in ("upper_case", "cycles"):
        if flag in data and not isinstance(data[flag], bool):
            raise RequestError(f"{flag}: expected boolean, got {type(data[flag]).__name__}")
    if "upper_case" in data:
        options = options.with_upper_case(data["upper_case"])
    if "cycles" in data:
        options = options.with_cycles(data["cycles"])

    table = data.get("symbol_table")
    if table is not None:
        if not isinstance(table, Mapping):
            raise RequestError("symbol_table: expected object")
        for name in table.values():
            if not isinstance(name, str):
                raise RequestError("symbol_table: names must be strings")
        options = options.with_symbol_table(
            {symbol_key_from_wire(key): name for key, name in table.items()}
        )

    return options


# =============================================================================
# Request Envelope
# =============================================================================

@dataclass(frozen=True)
class Payload:
    """
    Common input to the disassembly service.

    Attributes:
        data: Bytes to disassemble
        width: Requested architecture bit width
        syntax: Optional syntax name (ignored by single-syntax adapters)
        options: Output formatting options
    """
    data: bytes
    width: BitWidth
    syntax: Optional[str]
    options: OutputOptions

    def to_wire(self) -> Dict[str, Any]:
        return {
            "bytes": list(self.data),
            "width": self.width.wire_name,
            "syntax": self.syntax,
            "format": options_to_wire(self.options),
        }


def payload_from_wire(data: Mapping[str, Any]) -> Payload:
    """
    Decode a request envelope.

    Raises:
        RequestError: If a required field is missing or any field is malformed
    """
    if not isinstance(data, Mapping):
        raise RequestError(f"Request must be an object, got {type(data).__name__}")

    for required in ("bytes", "width"):
        if required not in data:
            raise RequestError(f"Missing required field: {required}")

    try:
        buffer = parse_byte_buffer(data["bytes"])
        width = BitWidth.parse(data["width"])
    except ValueError as e:
        raise RequestError(str(e)) from e

    syntax = data.get("syntax")
    if syntax is not None and not isinstance(syntax, str):
        raise RequestError(f"syntax: expected string, got {type(syntax).__name__}")

    return Payload(
        data=buffer,
        width=width,
        syntax=syntax,
        options=options_from_wire(data.get("format")),
    )
