"""
polydisasm Command-Line Interface
=================================

This package provides command-line tools for the disassembly service:

- **pdisasm**: disassemble a binary file for one architecture

The JSON-RPC server is started with ``pdisasm-server`` (see
polydisasm.service.server).

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["pdisasm"]
