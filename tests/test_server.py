"""
Unit Tests for the JSON-RPC Server
==================================

Tests for DisasmServer request processing and its tools, without stdio.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import json

import pytest

from polydisasm import __version__
from polydisasm.config import ServiceConfig
from polydisasm.service.server import DisasmServer


def _tool_payload(response):
    """Decode the JSON document carried by a tools/call response."""
    return json.loads(response["result"]["content"][0]["text"])


class TestProtocol:
    """Tests for JSON-RPC method dispatch."""

    def setup_method(self):
        self.server = DisasmServer()

    @pytest.mark.asyncio
    async def test_initialize(self):
        response = await self.server.process_request(
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}}
        )
        info = response["result"]["serverInfo"]
        assert response["id"] == 1
        assert info == {"name": "polydisasm", "version": __version__}

    @pytest.mark.asyncio
    async def test_initialized_notification(self):
        response = await self.server.process_request(
            {"jsonrpc": "2.0", "method": "notifications/initialized"}
        )
        assert response is None

    @pytest.mark.asyncio
    async def test_list_tools(self):
        response = await self.server.process_request(
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"}
        )
        names = [tool["name"] for tool in response["result"]["tools"]]
        assert names == ["disassemble", "list_architectures"]

    @pytest.mark.asyncio
    async def test_unknown_method(self):
        response = await self.server.process_request(
            {"jsonrpc": "2.0", "id": 3, "method": "resources/list"}
        )
        assert response["error"]["code"] == -32601

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        response = await self.server.process_request({
            "jsonrpc": "2.0", "id": 4, "method": "tools/call",
            "params": {"name": "assemble", "arguments": {}},
        })
        assert response["result"]["isError"] is True

    @pytest.mark.asyncio
    async def test_process_line(self):
        line = json.dumps({"jsonrpc": "2.0", "id": 5, "method": "tools/list"})
        response = json.loads(await self.server.process_line(line + "\n"))
        assert response["id"] == 5

    @pytest.mark.asyncio
    async def test_process_line_ignores_garbage(self):
        assert await self.server.process_line("") is None
        assert await self.server.process_line("{not json") is None
        assert await self.server.process_line("[1, 2]") is None


class TestTools:
    """Tests for the disassemble and list_architectures tools."""

    def setup_method(self):
        self.server = DisasmServer()

    async def _call(self, name, arguments):
        return await self.server.process_request({
            "jsonrpc": "2.0", "id": 10, "method": "tools/call",
            "params": {"name": name, "arguments": arguments},
        })

    @pytest.mark.asyncio
    async def test_disassemble_mos6502(self):
        response = await self._call("disassemble", {
            "arch": "mos6502",
            "bytes": [0xA9, 0xBD, 0xA0, 0xBD, 0x20, 0x28, 0xBA],
            "width": "Bit8",
        })
        assert response["result"]["isError"] is False
        assert _tool_payload(response) == {"lines": [
            "0000 A9 BD    LDA #$BD",
            "0002 A0 BD    LDY #$BD",
            "0004 20 28 BA JSR $BA28",
        ]}

    @pytest.mark.asyncio
    async def test_disassemble_x86_att(self):
        response = await self._call("disassemble", {
            "arch": "x86",
            "bytes": "55",
            "width": 64,
            "syntax": "att",
            "format": {"address": "None", "upper_case": False},
        })
        assert _tool_payload(response) == {"lines": ["pushq %rbp"]}

    @pytest.mark.asyncio
    async def test_disassemble_error_is_classified(self):
        response = await self._call("disassemble", {
            "arch": "risc_v", "bytes": [], "width": "Bit32",
        })
        assert response["result"]["isError"] is True
        assert _tool_payload(response) == {
            "error": "The implementation has not been done",
            "category": "not_implemented",
            "status": 501,
        }

    @pytest.mark.asyncio
    async def test_disassemble_requires_arch(self):
        response = await self._call("disassemble", {"bytes": [], "width": 8})
        assert response["result"]["isError"] is True
        assert "arch" in response["result"]["content"][0]["text"]

    @pytest.mark.asyncio
    async def test_size_limit_from_config(self):
        server = DisasmServer(ServiceConfig(max_input_bytes=1))
        response = await server.handle_call_tool("disassemble", {
            "arch": "mos6502", "bytes": [0xEA, 0xEA], "width": 8,
        })
        payload = json.loads(response["content"][0]["text"])
        assert payload["status"] == 400
        assert payload["error"].startswith("Input too large")

    @pytest.mark.asyncio
    async def test_list_architectures(self):
        response = await self._call("list_architectures", {})
        assert _tool_payload(response) == {"architectures": [
            {"name": "mos6502", "widths": [8], "syntaxes": []},
            {"name": "x86", "widths": [16, 32, 64], "syntaxes": ["intel", "att"]},
            {"name": "risc_v", "widths": [16, 32], "syntaxes": []},
        ]}
