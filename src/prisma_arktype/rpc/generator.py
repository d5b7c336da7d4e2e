"""Prisma generator protocol.

Prisma spawns the generator and sends JSON-RPC requests as JSON lines on its
stdin; responses go back as JSON lines on stderr.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TextIO

from prisma_arktype.config import DEFAULT_OUTPUT, GeneratorConfig, resolve_config
from prisma_arktype.core.generate import GeneratedSchemas, generate
from prisma_arktype.loader import parse_datamodel
from prisma_arktype.writer import write_files

logger = logging.getLogger(__name__)

PRETTY_NAME = "prisma-arktype"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
GENERATOR_ERROR = -32000


def manifest() -> dict[str, Any]:
    return {"defaultOutput": DEFAULT_OUTPUT, "prettyName": PRETTY_NAME}


def config_from_options(options: dict[str, Any]) -> GeneratorConfig:
    generator = options.get("generator") or {}
    output = (generator.get("output") or {}).get("value")
    return resolve_config(generator.get("config") or {}, output=output)


def run_generate(
    options: dict[str, Any],
    writer: Callable[[GeneratedSchemas, GeneratorConfig], Any] = write_files,
) -> GeneratedSchemas:
    config = config_from_options(options)
    datamodel = parse_datamodel(options.get("dmmf") or {})
    schemas = generate(datamodel, config)
    writer(schemas, config)
    return schemas


def _error(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def handle_request(request: dict[str, Any]) -> dict[str, Any]:
    request_id = request.get("id")
    method = request.get("method")

    if method == "getManifest":
        return {"jsonrpc": "2.0", "id": request_id, "result": {"manifest": manifest()}}

    if method == "generate":
        try:
            run_generate(request.get("params") or {})
        except Exception as exc:
            logger.exception("Generation failed")
            return _error(request_id, GENERATOR_ERROR, str(exc))
        return {"jsonrpc": "2.0", "id": request_id, "result": None}

    return _error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")


def serve(stdin: TextIO, stderr: TextIO) -> None:
    """Answer requests until stdin closes."""
    for line in stdin:
        if not line.strip():
            continue
        try:
            request = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.warning("Discarding malformed request: %s", exc)
            response = _error(None, PARSE_ERROR, f"Parse error: {exc}")
        else:
            if isinstance(request, dict):
                response = handle_request(request)
            else:
                response = _error(None, INVALID_REQUEST, "Request must be a JSON object")
        stderr.write(json.dumps(response) + "\n")
        stderr.flush()
