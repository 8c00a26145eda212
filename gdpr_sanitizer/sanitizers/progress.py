"""Progress reporting for long record passes."""

from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn


class ProgressReporter:
    """Receives progress of a record pass."""

    def start(self, description: str, total: int) -> None:
        pass

    def advance(self) -> None:
        pass

    def finish(self) -> None:
        pass


class NullProgress(ProgressReporter):
    """Discards progress."""


class RichProgressReporter(ProgressReporter):
    """Render each record pass as a rich progress bar."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console
        self._progress: Optional[Progress] = None
        self._task = None

    def start(self, description: str, total: int) -> None:
        self.finish()
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=self.console,
        )
        self._progress.start()
        self._task = self._progress.add_task(description, total=total)

    def advance(self) -> None:
        if self._progress is not None:
            self._progress.advance(self._task)

    def finish(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None
