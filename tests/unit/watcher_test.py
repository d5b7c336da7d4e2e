"""Tests for the watchfiles schema watcher."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from prisma_arktype.watcher.watchfiles_adapter import SchemaWatcher, _is_schema_change


class TestIsSchemaChange:
    def test_same_file(self, tmp_path: Path) -> None:
        schema = tmp_path / "dmmf.json"
        assert _is_schema_change(tmp_path / "dmmf.json", schema) is True

    def test_relative_and_absolute_match(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert _is_schema_change(tmp_path / "dmmf.json", Path("dmmf.json")) is True

    def test_other_file(self, tmp_path: Path) -> None:
        assert _is_schema_change(tmp_path / "other.json", tmp_path / "dmmf.json") is False


class TestSchemaWatcher:
    @pytest.mark.asyncio
    async def test_start_creates_task(self, tmp_path: Path) -> None:
        watcher = SchemaWatcher(tmp_path / "dmmf.json", AsyncMock())

        with patch("prisma_arktype.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            assert watcher._task is not None
            await watcher.stop()
            assert watcher._task is None

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self, tmp_path: Path) -> None:
        watcher = SchemaWatcher(tmp_path / "dmmf.json", AsyncMock())
        await watcher.stop()

    @pytest.mark.asyncio
    async def test_double_start_is_noop(self, tmp_path: Path) -> None:
        watcher = SchemaWatcher(tmp_path / "dmmf.json", AsyncMock())

        with patch("prisma_arktype.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            task = watcher._task
            await watcher.start()
            assert watcher._task is task
            await watcher.stop()

    @pytest.mark.asyncio
    async def test_callback_only_for_schema_file(self, tmp_path: Path) -> None:
        schema = tmp_path / "dmmf.json"
        callback = AsyncMock()
        watcher = SchemaWatcher(schema, callback)
        changes = [
            {(2, str(tmp_path / "notes.txt"))},
            {(2, str(schema)), (1, str(tmp_path / "other.json"))},
        ]

        with patch("prisma_arktype.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _async_iter(changes)
            await watcher.start()
            await watcher.wait()

        callback.assert_awaited_once_with(schema)

    @pytest.mark.asyncio
    async def test_callback_errors_are_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        schema = tmp_path / "dmmf.json"
        callback = AsyncMock(side_effect=RuntimeError("boom"))
        watcher = SchemaWatcher(schema, callback)

        with patch("prisma_arktype.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _async_iter([{(2, str(schema))}])
            await watcher.start()
            await watcher.wait()

        assert "Error while regenerating" in caplog.text

    @pytest.mark.asyncio
    async def test_wait_without_start_returns(self, tmp_path: Path) -> None:
        watcher = SchemaWatcher(tmp_path / "dmmf.json", AsyncMock())
        await asyncio.wait_for(watcher.wait(), timeout=1)


async def _empty_async_iter() -> AsyncIterator[Any]:
    return
    yield  # noqa: RET503


async def _async_iter(items: list[Any]) -> AsyncIterator[Any]:
    for item in items:
        yield item
