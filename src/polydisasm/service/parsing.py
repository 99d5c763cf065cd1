"""
Request Parameter Parsing
=========================

Utilities for parsing numeric parameter values from request envelopes.

Clients may send numeric values in various formats:
    - Integer: 0x8100, 33024
    - String hex: "0x8100", "0X8100", "$8100"
    - String decimal: "33024"

These utilities normalize values to Python integers with proper validation.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Any, List, Optional


def parse_integer(
    value: Any,
    param_name: str,
    min_val: int = 0,
    max_val: Optional[int] = None,
) -> int:
    """
    Parse an integer value from various input formats.

    Accepts:
        - int: Used directly (e.g., 0x8100, 33024)
        - str with "0x"/"0X" prefix: Hex string (e.g., "0x8100")
        - str with "$" prefix: Assembly-style hex (e.g., "$8100")
        - str decimal: Decimal string (e.g., "33024")

    Unlike the address fields of an emulator, disassembly offsets have no
    natural upper bound, so ``max_val`` is optional.

    Args:
        value: The input value to parse
        param_name: Name of the parameter (for error messages)
        min_val: Minimum allowed value (inclusive, default 0)
        max_val: Maximum allowed value (inclusive, default unbounded)

    Returns:
        The parsed integer value

    Raises:
        ValueError: If parsing fails or value is out of range

    Examples:
        >>> parse_integer(0x8100, "offset")
        33024
        >>> parse_integer("$8100", "offset")
        33024
        >>> parse_integer("33024", "offset")
        33024
    """
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{param_name}: empty string")

        try:
            if text.startswith(("0x", "0X")):
                parsed = int(text, 16)
            elif text.startswith("$"):
                parsed = int(text[1:], 16)
            else:
                parsed = int(text, 10)
        except ValueError as e:
            raise ValueError(
                f"{param_name}: cannot parse '{value}' as integer. "
                f"Use decimal (33024) or hex (0x8100, $8100)"
            ) from e
    else:
        raise ValueError(
            f"{param_name}: expected integer or string, got {type(value).__name__}"
        )

    if parsed < min_val or (max_val is not None and parsed > max_val):
        upper = "" if max_val is None else str(max_val)
        raise ValueError(
            f"{param_name}: value {parsed} out of range. Must be {min_val}-{upper}"
        )

    return parsed


def parse_byte_buffer(value: Any, param_name: str = "bytes") -> bytes:
    """
    Parse a byte buffer from a request.

    Accepts a list of integers (0-255 each, in any format parse_integer
    understands) or a hex string ("A9BD", "a9 bd", "0xa9bd").

    Raises:
        ValueError: If the value is not a valid buffer
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            text = text[2:]
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"{param_name}: invalid hex string") from e

    if isinstance(value, list):
        result: List[int] = []
        for index, item in enumerate(value):
            result.append(parse_integer(item, f"{param_name}[{index}]", 0, 0xFF))
        return bytes(result)

    raise ValueError(
        f"{param_name}: expected list of bytes or hex string, got {type(value).__name__}"
    )
