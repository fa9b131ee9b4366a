"""Progress reporting for CLI operations.

Batch commands report progress through the :class:`ProgressReporter`
interface; :func:`select_reporter` picks an implementation from the
``--quiet`` and ``--non-interactive`` flags. Indeterminate work uses
:class:`SpinnerReporter` and transfers use :class:`DownloadReporter`.

Displays are drawn with Rich on stderr so that stdout stays clean for data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog
from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TransferSpeedColumn,
)

logger = structlog.get_logger()

# Default Braille spinner characters
BRAILLE_TICK_CHARS = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

DEFAULT_TICK_INTERVAL = 0.1  # seconds


class ProgressReporter(ABC):
    """Interface for reporting progress of multi-item operations."""

    @abstractmethod
    def start(self, total: int, operation_name: str) -> None:
        """Called when starting a batch operation."""

    @abstractmethod
    def progress(self, current: int, total: int, item_name: str) -> None:
        """Called to report progress on an individual item."""

    @abstractmethod
    def success(self, item_name: str) -> None:
        """Called when an item succeeds."""

    @abstractmethod
    def skip(self, item_name: str, reason: str) -> None:
        """Called when an item is skipped."""

    @abstractmethod
    def failure(self, item_name: str, error: str) -> None:
        """Called when an item fails."""

    @abstractmethod
    def finish(self, total: int) -> None:
        """Called when the batch operation finishes."""


class InteractiveReporter(ProgressReporter):
    """Progress reporter drawing an interactive progress bar.

    Failures are counted and summarized when the operation finishes.
    """

    def __init__(
        self, console: Console | None = None, summary_console: Console | None = None
    ) -> None:
        self.console = console or Console(stderr=True)
        self.summary_console = summary_console or Console(highlight=False)
        self.failures = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __repr__(self) -> str:
        active = self._progress is not None
        return f"InteractiveReporter(active={active}, failures={self.failures})"

    def start(self, total: int, operation_name: str) -> None:
        if self._progress is not None:
            self._progress.stop()
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40, style="red", complete_style="green"),
            MofNCompleteColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._task_id = progress.add_task(operation_name, total=total)
        progress.start()
        self._progress = progress
        self.failures = 0
        logger.debug("Progress started", operation=operation_name, total=total)

    def progress(self, current: int, total: int, item_name: str) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.advance(self._task_id)

    def success(self, item_name: str) -> None:
        pass

    def skip(self, item_name: str, reason: str) -> None:
        pass

    def failure(self, item_name: str, error: str) -> None:
        self.failures += 1

    def finish(self, total: int) -> None:
        if self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task_id = None

        successes = max(0, total - self.failures)
        if self.failures == 0:
            summary = f"Completed: {total} items processed successfully"
        elif successes == 0:
            summary = f"Failed: all {total} items failed"
        else:
            summary = (
                f"Completed with failures: {successes} succeeded, "
                f"{self.failures} failed of {total} total"
            )
        self.summary_console.print(summary)
        logger.debug("Progress finished", total=total, failures=self.failures)


class NonInteractiveReporter(ProgressReporter):
    """Progress reporter for non-interactive environments such as CI logs."""

    def __init__(
        self, console: Console | None = None, summary_console: Console | None = None
    ) -> None:
        self.console = console or Console(stderr=True)
        self.summary_console = summary_console or Console(highlight=False)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __repr__(self) -> str:
        return f"NonInteractiveReporter(active={self._progress is not None})"

    def start(self, total: int, operation_name: str) -> None:
        if self._progress is not None:
            self._progress.stop()
        progress = Progress(
            TextColumn("{task.description}:"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._task_id = progress.add_task(operation_name, total=total)
        progress.start()
        self._progress = progress

    def progress(self, current: int, total: int, item_name: str) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.advance(self._task_id)

    def success(self, item_name: str) -> None:
        pass

    def skip(self, item_name: str, reason: str) -> None:
        pass

    def failure(self, item_name: str, error: str) -> None:
        pass

    def finish(self, total: int) -> None:
        if self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task_id = None
        self.summary_console.print(f"Completed: {total} items processed")


class QuietReporter(ProgressReporter):
    """Progress reporter that produces no output."""

    def __repr__(self) -> str:
        return "QuietReporter()"

    def start(self, total: int, operation_name: str) -> None:
        pass

    def progress(self, current: int, total: int, item_name: str) -> None:
        pass

    def success(self, item_name: str) -> None:
        pass

    def skip(self, item_name: str, reason: str) -> None:
        pass

    def failure(self, item_name: str, error: str) -> None:
        pass

    def finish(self, total: int) -> None:
        pass


def select_reporter(
    quiet: bool,
    non_interactive: bool,
    console: Console | None = None,
) -> ProgressReporter:
    """Select a progress reporter based on mode flags.

    ``quiet`` takes precedence over ``non_interactive``.
    """
    if quiet:
        return QuietReporter()
    if non_interactive:
        return NonInteractiveReporter(console=console)
    return InteractiveReporter(console=console)


class SpinnerReporter:
    """Spinner for indeterminate operations.

    Usage:
        spinner = SpinnerReporter().with_tick_chars(BRAILLE_TICK_CHARS)
        spinner.start("Resolving dependencies...")
        spinner.set_message("Downloading index...")
        spinner.finish("Resolved 42 packages")
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self.tick_chars: list[str] | None = None
        self.tick_interval = DEFAULT_TICK_INTERVAL
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __repr__(self) -> str:
        return (
            f"SpinnerReporter(active={self._progress is not None}, "
            f"tick_interval={self.tick_interval})"
        )

    def with_tick_chars(self, chars: Sequence[str]) -> SpinnerReporter:
        """Set custom tick characters for the spinner animation."""
        self.tick_chars = list(chars)
        return self

    def with_tick_interval(self, interval: float) -> SpinnerReporter:
        """Set the tick interval of the spinner animation in seconds."""
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self.tick_interval = interval
        return self

    def start(self, message: str) -> None:
        """Start the spinner with a message."""
        if self._progress is not None:
            self._progress.stop()
        spinner_column = SpinnerColumn(style="green")
        if self.tick_chars:
            spinner_column.spinner.frames = list(self.tick_chars)
        # Rich spinner intervals are in milliseconds
        spinner_column.spinner.interval = self.tick_interval * 1000
        progress = Progress(
            spinner_column,
            TextColumn("{task.description}"),
            console=self.console,
            refresh_per_second=max(1.0, 1.0 / self.tick_interval),
        )
        self._task_id = progress.add_task(message, total=None)
        progress.start()
        self._progress = progress

    def set_message(self, message: str) -> None:
        """Update the spinner message."""
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, description=message)

    def finish(self, message: str) -> None:
        """Stop the spinner, leaving a final message."""
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, description=message, total=1, completed=1)
        self._progress.stop()
        self._progress = None
        self._task_id = None

    def finish_and_clear(self) -> None:
        """Stop the spinner and remove it from the display."""
        if self._progress is None or self._task_id is None:
            return
        self._progress.remove_task(self._task_id)
        self._progress.stop()
        self._progress = None
        self._task_id = None


class DownloadReporter:
    """Progress bar for downloads showing bytes transferred and speed."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def __repr__(self) -> str:
        return f"DownloadReporter(active={self._progress is not None})"

    def start(self, total_bytes: int, message: str) -> None:
        """Start the download progress bar with the total size in bytes."""
        if self._progress is not None:
            self._progress.stop()
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan"),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._task_id = progress.add_task(message, total=total_bytes)
        progress.start()
        self._progress = progress

    def inc(self, num_bytes: int) -> None:
        """Advance the progress by ``num_bytes``."""
        if self._progress is not None and self._task_id is not None:
            self._progress.advance(self._task_id, num_bytes)

    def set_position(self, num_bytes: int) -> None:
        """Set the number of bytes transferred so far."""
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=num_bytes)

    def set_message(self, message: str) -> None:
        """Update the message."""
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, description=message)

    def position(self) -> int:
        """Return the number of bytes transferred so far, 0 when not started."""
        if self._progress is None or self._task_id is None:
            return 0
        for task in self._progress.tasks:
            if task.id == self._task_id:
                return int(task.completed)
        return 0

    def finish(self, message: str) -> None:
        """Finish the download with a final message."""
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, description=message)
        self._progress.stop()
        self._progress = None
        self._task_id = None

    def finish_and_clear(self) -> None:
        """Finish and remove the progress bar from the display."""
        if self._progress is None or self._task_id is None:
            return
        self._progress.remove_task(self._task_id)
        self._progress.stop()
        self._progress = None
        self._task_id = None
