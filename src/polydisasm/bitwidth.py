"""
Architecture Bit Widths
=======================

The closed set of instruction-set widths understood by the service. Each
adapter validates the requested width against its own supported subset.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from enum import IntEnum
from typing import Any


class BitWidth(IntEnum):
    """
    Architecture bit width.

    The integer value is the number of bits, so members can be passed
    directly wherever a bit count is expected.
    """
    BIT8 = 8
    BIT16 = 16
    BIT32 = 32
    BIT64 = 64

    def __str__(self) -> str:
        """Return human-readable name for error messages ("32 bit")."""
        return f"{self.value} bit"

    @property
    def wire_name(self) -> str:
        """Tag used in request envelopes ("Bit32")."""
        return f"Bit{self.value}"

    @classmethod
    def parse(cls, value: Any) -> "BitWidth":
        """
        Parse a bit width from the formats accepted on the wire.

        Accepts:
            - BitWidth: returned unchanged
            - int: bit count (8, 16, 32, 64)
            - str: bit count ("32") or wire tag ("Bit32", case-insensitive)

        Raises:
            ValueError: If the value does not name a known width
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            bits = value
        elif isinstance(value, str):
            text = value.strip().lower()
            if text.startswith("bit"):
                text = text[3:]
            try:
                bits = int(text, 10)
            except ValueError:
                raise ValueError(f"Invalid bit width: {value!r}") from None
        else:
            raise ValueError(
                f"Invalid bit width: expected integer or string, "
                f"got {type(value).__name__}"
            )

        try:
            return cls(bits)
        except ValueError:
            raise ValueError(
                f"Invalid bit width: {value!r} (expected 8, 16, 32 or 64)"
            ) from None
