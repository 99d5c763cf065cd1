"""
Output Formatting Options
=========================

Value objects that control how a disassembly listing is rendered:

- **ShowAddress**: hide addresses, or show them from a start offset
- **OutputOptions**: address mode, stop address, case, cycles, symbols
- **SymbolInfo / Scope**: key type of the (not yet applied) symbol table

OutputOptions is immutable. The ``with_*`` builder methods return a new
instance, so a single options object can be shared between requests and
adapters without copying:

    options = (
        OutputOptions()
        .with_addresses(ShowAddress.start(0x8000))
        .with_stop(0x8010)
        .with_upper_case(False)
    )

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Symbol Table Keys
# =============================================================================

class Scope(Enum):
    """Symbol visibility scope."""
    LOCAL = "Local"
    GLOBAL = "Global"

    def __lt__(self, other: "Scope") -> bool:
        if not isinstance(other, Scope):
            return NotImplemented
        return _SCOPE_ORDER[self] < _SCOPE_ORDER[other]


_SCOPE_ORDER = {Scope.LOCAL: 0, Scope.GLOBAL: 1}


@dataclass(frozen=True, order=True)
class SymbolInfo:
    """
    Symbol attributes used as a symbol table key.

    Attributes:
        address: Address the symbol names
        scope: Visibility of the symbol
    """
    address: int
    scope: Scope = Scope.GLOBAL


# =============================================================================
# Address Display
# =============================================================================

@dataclass(frozen=True)
class ShowAddress:
    """
    Address display mode.

    ``offset`` is None when addresses are hidden; otherwise it is the
    value added to (or used as the start of) every displayed address.
    Use the ``none()`` and ``start()`` constructors rather than building
    instances directly.
    """
    offset: Optional[int] = 0

    def __post_init__(self):
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"Address offset must be non-negative, got {self.offset}")

    @classmethod
    def none(cls) -> "ShowAddress":
        """Do not show addresses."""
        return cls(offset=None)

    @classmethod
    def start(cls, offset: int = 0) -> "ShowAddress":
        """Show addresses starting at ``offset``."""
        return cls(offset=offset)

    @property
    def enabled(self) -> bool:
        return self.offset is not None

    def __str__(self) -> str:
        if self.offset is None:
            return "none"
        return f"start at 0x{self.offset:X}"


# =============================================================================
# Output Options
# =============================================================================

@dataclass(frozen=True)
class OutputOptions:
    """
    Output disassembly formatting options.

    The defaults show addresses from zero, in upper case, without cycles,
    symbols or a stop address.

    Attributes:
        address: Address display mode
        stop_at: Stop address (adapter-specific inclusivity), None = no limit
        upper_case: Render mnemonics, operands and hex digits in upper case
        cycles: Show instruction cycle counts (no adapter supports this yet)
        symbol_table: Names for symbols (no adapter applies these yet)
    """
    address: ShowAddress = field(default_factory=ShowAddress)
    stop_at: Optional[int] = None
    upper_case: bool = True
    cycles: bool = False
    symbol_table: Optional[Mapping[SymbolInfo, str]] = None

    def __post_init__(self):
        if self.stop_at is not None and self.stop_at < 0:
            raise ValueError(f"Stop address must be non-negative, got {self.stop_at}")
        if self.symbol_table is not None and not isinstance(self.symbol_table, MappingProxyType):
            # Read-only private copy
            object.__setattr__(
                self, "symbol_table", MappingProxyType(dict(self.symbol_table))
            )

    def with_addresses(self, address: ShowAddress) -> "OutputOptions":
        """Show addresses in a disassembly output."""
        return replace(self, address=address)

    def with_upper_case(self, capital: bool) -> "OutputOptions":
        """Choose case of a disassembly output."""
        return replace(self, upper_case=capital)

    def with_cycles(self, cycles: bool) -> "OutputOptions":
        """Show cycles in a disassembly output."""
        return replace(self, cycles=cycles)

    def with_symbol_table(self, table: Mapping[SymbolInfo, str]) -> "OutputOptions":
        """Replace addresses with symbol names in a disassembly output."""
        return replace(self, symbol_table=table)

    def with_stop(self, stop: int) -> "OutputOptions":
        """Stop the listing at the given address."""
        return replace(self, stop_at=stop)
