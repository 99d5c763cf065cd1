"""
Disassembly JSON-RPC Server
===========================

JSON-RPC 2.0 server exposing the disassembly service over stdio, one
request per line, in the shape of a Model Context Protocol tool server.

This server provides tools for:
- Disassembling a request envelope with a named architecture
- Listing the available architectures with their widths and syntaxes

Architecture:
    DisasmServer
        └── tool handlers
                └── handle_envelope() (polydisasm.service.handlers)

Usage:
    # Run as standalone server
    python -m polydisasm.service.server

    # Or programmatically
    server = DisasmServer()
    await server.run()

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from polydisasm import __version__
from polydisasm.config import ServiceConfig
from polydisasm.disassembler import ARCHITECTURES, Mos6502, RiscV, X86, Syntax

from .handlers import handle_envelope


logger = logging.getLogger(__name__)


# =============================================================================
# Protocol Types
# =============================================================================

@dataclass
class ToolDefinition:
    """Definition of a server tool."""
    name: str
    description: str
    input_schema: Dict[str, Any]


@dataclass
class ToolResult:
    """Result from a tool execution."""
    content: List[Dict[str, Any]]
    is_error: bool = False


def text_content(text: str) -> List[Dict[str, Any]]:
    """Create text content for tool result."""
    return [{"type": "text", "text": text}]


def error_result(message: str) -> ToolResult:
    """Create error tool result."""
    return ToolResult(content=text_content(message), is_error=True)


def json_result(data: Dict[str, Any], is_error: bool = False) -> ToolResult:
    """Create tool result carrying a JSON document as text."""
    return ToolResult(content=text_content(json.dumps(data)), is_error=is_error)


ToolHandler = Callable[["DisasmServer", Dict[str, Any]], Awaitable[ToolResult]]


# =============================================================================
# Tools
# =============================================================================

async def disassemble_tool(server: "DisasmServer", args: Dict[str, Any]) -> ToolResult:
    """Disassemble the envelope in ``args`` with the architecture ``args["arch"]``."""
    arch = args.get("arch")
    if not isinstance(arch, str):
        return error_result("disassemble: 'arch' must be a string")

    envelope = {key: value for key, value in args.items() if key != "arch"}
    response = handle_envelope(arch, envelope, server.config)
    return json_result(response.to_dict(), is_error=not response.ok)


async def list_architectures_tool(server: "DisasmServer", args: Dict[str, Any]) -> ToolResult:
    """Describe every registered architecture."""
    syntaxes = {X86.name: [s.value for s in Syntax]}
    widths = {cls.name: [int(w) for w in cls.widths] for cls in (Mos6502, X86, RiscV)}
    return json_result({
        "architectures": [
            {"name": name, "widths": widths[name], "syntaxes": syntaxes.get(name, [])}
            for name in ARCHITECTURES
        ]
    })


# =============================================================================
# Server
# =============================================================================

class DisasmServer:
    """
    JSON-RPC server for the disassembly service.

    The server communicates via JSON-RPC 2.0 over stdio. Diagnostics go to
    the logging system (stderr), never to stdout.

    Attributes:
        config: Service configuration shared by every request
    """

    SERVER_NAME = "polydisasm"
    SERVER_VERSION = __version__
    PROTOCOL_VERSION = "2024-11-05"

    def __init__(self, config: Optional[ServiceConfig] = None):
        """Initialize the server and register its tools."""
        self.config = config or ServiceConfig()
        self._tools: Dict[str, ToolHandler] = {}
        self._tool_definitions: Dict[str, ToolDefinition] = {}
        self._running = False

        self._register_tools()

    def _register_tools(self) -> None:
        """Register all available tools."""
        self._register_tool(
            "disassemble",
            disassemble_tool,
            "Disassemble a byte buffer for one architecture",
            {
                "type": "object",
                "properties": {
                    "arch": {
                        "type": "string",
                        "enum": list(ARCHITECTURES),
                        "description": "Target architecture",
                    },
                    "bytes": {
                        "description": "Bytes to decode: array of 0-255 or hex string",
                    },
                    "width": {
                        "description": "Bit width: Bit8, Bit16, Bit32, Bit64 or a number",
                    },
                    "syntax": {
                        "type": "string",
                        "description": "Syntax for x86: intel, att or at&t",
                    },
                    "format": {
                        "type": "object",
                        "description": "Output options: address, stop_at, upper_case, "
                                       "cycles, symbol_table",
                    },
                },
                "required": ["arch", "bytes", "width"],
            },
        )

        self._register_tool(
            "list_architectures",
            list_architectures_tool,
            "List supported architectures with their bit widths and syntaxes",
            {"type": "object", "properties": {}, "required": []},
        )

    def _register_tool(
        self,
        name: str,
        handler: ToolHandler,
        description: str,
        input_schema: Dict[str, Any],
    ) -> None:
        """
        Register a tool with the server.

        Args:
            name: Tool name
            handler: Async function to handle tool calls
            description: Human-readable description
            input_schema: JSON Schema for tool input
        """
        self._tools[name] = handler
        self._tool_definitions[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
        )

    # =========================================================================
    # Protocol Methods
    # =========================================================================

    async def handle_initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Handle initialize request: return server capabilities and info."""
        return {
            "protocolVersion": self.PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self.SERVER_NAME,
                "version": self.SERVER_VERSION,
            },
        }

    async def handle_list_tools(self) -> Dict[str, Any]:
        """Handle tools/list request."""
        return {
            "tools": [
                {
                    "name": defn.name,
                    "description": defn.description,
                    "inputSchema": defn.input_schema,
                }
                for defn in self._tool_definitions.values()
            ]
        }

    async def handle_call_tool(self, name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Handle tools/call request: run the tool and wrap its result."""
        if name not in self._tools:
            result = error_result(f"Unknown tool: {name}")
        else:
            try:
                result = await self._tools[name](self, arguments)
            except Exception as e:
                logger.exception("Tool %s failed", name)
                result = error_result(f"Tool error: {e}")

        return {"content": result.content, "isError": result.is_error}

    # =========================================================================
    # JSON-RPC Processing
    # =========================================================================

    async def process_request(self, request: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Process a JSON-RPC request.

        Args:
            request: The JSON-RPC request object

        Returns:
            Response object, or None for notifications
        """
        method = request.get("method", "")
        params = request.get("params") or {}
        request_id = request.get("id")

        try:
            if method == "initialize":
                result = await self.handle_initialize(params)
            elif method == "notifications/initialized":
                return None
            elif method == "tools/list":
                result = await self.handle_list_tools()
            elif method == "tools/call":
                result = await self.handle_call_tool(
                    params.get("name", ""), params.get("arguments") or {}
                )
            else:
                if request_id is None:
                    return None
                return {
                    "jsonrpc": "2.0",
                    "id": request_id,
                    "error": {"code": -32601, "message": f"Method not found: {method}"},
                }
        except Exception as e:
            logger.exception("Internal error handling %s", method)
            if request_id is None:
                return None
            return {
                "jsonrpc": "2.0",
                "id": request_id,
                "error": {"code": -32603, "message": f"Internal error: {e}"},
            }

        if request_id is None:
            return None
        return {"jsonrpc": "2.0", "id": request_id, "result": result}

    async def process_line(self, line: str) -> Optional[str]:
        """
        Process one line of input and return the response line, if any.

        Lines that are blank or not valid JSON produce no response.
        """
        line = line.strip()
        if not line:
            return None

        try:
            request = json.loads(line)
        except json.JSONDecodeError:
            logger.warning("Ignoring invalid JSON input")
            return None
        if not isinstance(request, dict):
            logger.warning("Ignoring non-object JSON-RPC message")
            return None

        response = await self.process_request(request)
        if response is None:
            return None
        return json.dumps(response)

    # =========================================================================
    # Server Main Loop
    # =========================================================================

    async def run(self) -> None:
        """
        Run the server.

        Reads JSON-RPC requests from stdin, processes them, and writes
        responses to stdout. Runs until stdin is closed.
        """
        self._running = True
        reader = asyncio.StreamReader()
        protocol = asyncio.StreamReaderProtocol(reader)
        await asyncio.get_running_loop().connect_read_pipe(lambda: protocol, sys.stdin)
        logger.info("%s %s listening on stdio", self.SERVER_NAME, self.SERVER_VERSION)

        while self._running:
            raw = await reader.readline()
            if not raw:
                break

            try:
                response = await self.process_line(raw.decode("utf-8"))
            except UnicodeDecodeError:
                logger.warning("Ignoring non-UTF-8 input line")
                continue

            if response is not None:
                sys.stdout.write(response + "\n")
                sys.stdout.flush()

        logger.info("stdin closed, shutting down")

    def shutdown(self) -> None:
        """Signal the server to shut down."""
        self._running = False


# =============================================================================
# Main Entry Point
# =============================================================================

def main() -> None:
    """Run the server from command line."""
    config = ServiceConfig.from_env()
    logging.basicConfig(
        level=config.logging_level,
        stream=sys.stderr,
        format="%(levelname)s: %(name)s: %(message)s",
    )
    server = DisasmServer(config)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
