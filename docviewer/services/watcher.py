"""
Docs Watcher — logs changes under the docs root while the server runs.

Event names follow the usual file-watcher vocabulary:
  add / addDir   a file / directory appeared (also reported for every
                 existing entry when watching starts)
  change         a file was modified
  unlink         a file or directory was removed

Nothing is filtered out: editor swap files and VCS directories are reported
too. Pages rescan the directory on every request, so the watcher only reports.
"""
from __future__ import annotations

import asyncio
import logging
import os
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from watchfiles import Change, awatch

logger = logging.getLogger(__name__)

MAX_RECENT_EVENTS = 50


@dataclass
class WatchEvent:
    event: str
    path: str


def describe_change(change: Change, path: str) -> str:
    if change == Change.added:
        return "addDir" if os.path.isdir(path) else "add"
    if change == Change.modified:
        return "change"
    return "unlink"


class DocsWatcher:
    def __init__(self, root: Path | str, max_recent: int = MAX_RECENT_EVENTS) -> None:
        self.root = Path(root)
        self.count = 0
        self.recent: deque[WatchEvent] = deque(maxlen=max_recent)
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def record(self, event: str, path: str) -> WatchEvent:
        logger.info(f"File {event}: {path}")
        item = WatchEvent(event=event, path=path)
        self.recent.append(item)
        self.count += 1
        return item

    def initial_scan(self) -> list[WatchEvent]:
        """Report everything already present under the root."""
        events: list[WatchEvent] = []
        if not self.root.is_dir():
            return events
        events.append(self.record("addDir", str(self.root)))
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames.sort()
            for name in dirnames:
                events.append(self.record("addDir", os.path.join(dirpath, name)))
            for name in sorted(filenames):
                events.append(self.record("add", os.path.join(dirpath, name)))
        return events

    async def run(self) -> None:
        await asyncio.to_thread(self.initial_scan)
        try:
            async for changes in awatch(self.root, watch_filter=None):
                for change, path in sorted(changes, key=lambda c: c[1]):
                    self.record(describe_change(change, path), path)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"File watcher stopped: {e}")

    def start(self) -> asyncio.Task:
        if self.running:
            return self._task
        self._task = asyncio.create_task(self.run(), name="docs-watcher")
        logger.info(f"Watching {self.root} for changes")
        return self._task

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
