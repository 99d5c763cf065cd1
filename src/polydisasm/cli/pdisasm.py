"""
pdisasm - Multi-Architecture Disassembler Command-Line Interface
================================================================

This module implements the command-line interface for the disassembly
service. It reads a binary file, runs it through the same request handler
the JSON-RPC server uses, and prints the listing.

Usage Examples
--------------
Disassemble 6502 machine code:
    $ pdisasm game.bin --arch mos6502

With base address, lower case:
    $ pdisasm game.bin --arch mos6502 --address 0x8000 --lower

64-bit x86 in AT&T syntax, stopping before offset 0x40:
    $ pdisasm code.bin --arch x86 --width 64 --syntax att --stop 0x40

Mnemonics only (no addresses):
    $ pdisasm code.bin --arch x86 --width 32 --no-address

Output to file:
    $ pdisasm code.bin --arch x86 --width 64 -o listing.asm

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

import click

from polydisasm import __version__
from polydisasm.bitwidth import BitWidth
from polydisasm.cli.errors import handle_cli_exception
from polydisasm.config import ServiceConfig
from polydisasm.disassembler import ARCHITECTURES
from polydisasm.errors import RequestError
from polydisasm.options import OutputOptions, ShowAddress, SymbolInfo
from polydisasm.service.handlers import DisassemblyRequest, disassemble_request
from polydisasm.service.parsing import parse_integer
from polydisasm.service.wire import symbol_key_from_wire


logger = logging.getLogger(__name__)


def _parse_number(value: str, name: str) -> int:
    try:
        return parse_integer(value, name)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def _load_symbols(path: Path) -> Dict[SymbolInfo, str]:
    """
    Load a symbol table file in the wire format.

    The file holds one JSON object mapping encoded SymbolInfo keys to names.
    """
    try:
        table = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RequestError(f"Invalid symbol file {path}: {e}") from e
    if not isinstance(table, dict):
        raise RequestError(f"Invalid symbol file {path}: expected a JSON object")
    return {symbol_key_from_wire(key): str(name) for key, name in table.items()}


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--arch",
    type=click.Choice(ARCHITECTURES, case_sensitive=False),
    default="mos6502",
    show_default=True,
    help="Target architecture",
)
@click.option(
    "-w", "--width",
    type=click.Choice([str(int(w)) for w in BitWidth]),
    default=None,
    help="Bit width (default: 8 for mos6502, 64 for x86, 32 for risc_v)",
)
@click.option(
    "-s", "--syntax",
    type=str,
    default=None,
    help="Syntax for x86: intel, att or at&t (default: configured, intel)",
)
@click.option(
    "-a", "--address",
    type=str,
    default="0",
    help="Address offset for the listing (hex with 0x/$ prefix or decimal). Default: 0",
)
@click.option(
    "--no-address",
    is_flag=True,
    help="Omit addresses (and raw bytes) from the output",
)
@click.option(
    "--stop",
    type=str,
    default=None,
    help="Stop address (inclusive for mos6502, exclusive for x86)",
)
@click.option(
    "--lower",
    is_flag=True,
    help="Lower-case output",
)
@click.option(
    "--cycles",
    is_flag=True,
    help="Show instruction cycles (not supported by any architecture yet)",
)
@click.option(
    "--symbols",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON symbol table file (not applied by any architecture yet)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="pdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    arch: str,
    width: Optional[str],
    syntax: Optional[str],
    address: str,
    no_address: bool,
    stop: Optional[str],
    lower: bool,
    cycles: bool,
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Disassemble machine code for MOS 6502, x86 or RISC-V.

    INPUT_FILE is the binary file to disassemble.

    Examples:

        # 6502 listing starting at $C000
        pdisasm rom.bin --arch mos6502 --address 0xC000

        # 32-bit x86, AT&T syntax, lower case
        pdisasm code.bin --arch x86 --width 32 --syntax att --lower
    """
    config = ServiceConfig.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging_level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )

    arch = arch.lower()
    try:
        bit_width = BitWidth.parse(width) if width is not None else _default_width(arch)

        options = OutputOptions(
            address=ShowAddress.none() if no_address
            else ShowAddress.start(_parse_number(address, "address")),
            stop_at=_parse_number(stop, "stop") if stop is not None else None,
            upper_case=not lower,
            cycles=cycles,
            symbol_table=_load_symbols(symbols) if symbols is not None else None,
        )

        data = input_file.read_bytes()
        logger.debug("Input file: %s (%d bytes)", input_file, len(data))

        request = DisassemblyRequest(
            arch=arch, data=data, width=bit_width, syntax=syntax, options=options
        )
        lines = disassemble_request(request, config)
    except Exception as e:
        handle_cli_exception(e, verbose)

    result = "".join(f"{line}\n" for line in lines)

    if output:
        try:
            output.write_text(result, encoding="utf-8")
        except OSError as e:
            handle_cli_exception(e, verbose)
        logger.debug("Output written to: %s", output)
    else:
        click.echo(result, nl=False)

    logger.debug("Instructions disassembled: %d", len(lines))


_DEFAULT_WIDTHS = {
    "mos6502": BitWidth.BIT8,
    "x86": BitWidth.BIT64,
    "risc_v": BitWidth.BIT32,
}


def _default_width(arch: str) -> BitWidth:
    return _DEFAULT_WIDTHS[arch]


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
