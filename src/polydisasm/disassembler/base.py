"""
Disassembler Capability
=======================

The abstract interface every architecture adapter implements.

An adapter validates its construction parameters in ``__init__`` (bit
width, syntax, ...) and then exposes a single operation:

    lines = adapter.disassemble(data, options)

The base class owns the option check, so that rejecting an unsupported
option happens once, before any decoding work, and identically for every
adapter. Subclasses implement ``_disassemble`` and advertise optional
features through class attributes:

    supports_cycles: Adapter can render instruction cycle counts
    supports_symbols: Adapter can substitute symbol table names

Neither feature is implemented by any adapter today, so requesting either
always raises UnsupportedOptionError.

The architecture-specific error type is declared by ``arch_error``; an
adapter whose engine cannot fail sets it to ``Infallible``.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List, Type, Union

from polydisasm.errors import ArchError, UnsupportedOptionError
from polydisasm.options import OutputOptions


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Disassembler(ABC):
    """
    Abstract base class for architecture disassemblers.

    Adapters carry no mutable state after construction, so one instance
    may serve any number of calls (including concurrent ones).
    """

    #: Short architecture name used by the registry and in log records
    name: ClassVar[str] = ""

    #: Architecture-specific error type raised by this adapter
    arch_error: ClassVar[Type[ArchError]] = ArchError

    supports_cycles: ClassVar[bool] = False
    supports_symbols: ClassVar[bool] = False

    @classmethod
    def check_options(cls, options: OutputOptions) -> None:
        """
        Reject options this adapter cannot honour.

        Raises:
            UnsupportedOptionError: If cycles or a symbol table are requested
                                    and the adapter does not support them
        """
        if options.symbol_table is not None and not cls.supports_symbols:
            raise UnsupportedOptionError()
        if options.cycles and not cls.supports_cycles:
            raise UnsupportedOptionError()

    def disassemble(self, data: BytesLike, options: OutputOptions) -> List[str]:
        """
        Disassemble ``data`` into formatted instruction lines.

        Args:
            data: Machine code to decode (may be empty)
            options: Output formatting options

        Returns:
            Complete list of lines in ascending address order

        Raises:
            UnsupportedOptionError: If an option is not supported
            DisasmError: Any other adapter-specific failure
        """
        self.check_options(options)
        lines = self._disassemble(bytes(data), options)
        logger.debug("%s: %d bytes -> %d lines", self.name, len(data), len(lines))
        return lines

    @abstractmethod
    def _disassemble(self, data: bytes, options: OutputOptions) -> List[str]:
        """Decode and format ``data``; options are already validated."""
        ...
