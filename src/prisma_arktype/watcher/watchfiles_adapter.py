from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import awatch

logger = logging.getLogger(__name__)


def _is_schema_change(changed: Path, schema_path: Path) -> bool:
    return changed.resolve() == schema_path.resolve()


class SchemaWatcher:
    """Watch a DMMF JSON file and trigger a callback whenever it changes."""

    def __init__(
        self,
        schema_path: str | Path,
        on_change: Callable[[Path], Coroutine[Any, Any, None]],
    ) -> None:
        self._schema_path = Path(schema_path)
        self._on_change = on_change
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %s", self._schema_path)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching %s", self._schema_path)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        # Watch the parent directory: editors often replace the file on save.
        async for changes in awatch(self._schema_path.parent):
            if any(_is_schema_change(Path(p), self._schema_path) for _, p in changes):
                logger.info("Detected change in %s", self._schema_path)
                try:
                    await self._on_change(self._schema_path)
                except Exception:
                    logger.exception("Error while regenerating from %s", self._schema_path)
