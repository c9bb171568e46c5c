"""Rich-based update progress display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID
from rich.text import Text

from langsync.engine.progress import UpdateProgress

_STEPS = 1000


class RichUpdateProgress(UpdateProgress):
    """Live terminal progress bar powered by Rich.

    Use as a context manager so the live display is properly started/stopped::

        with RichUpdateProgress() as progress:
            result = await LangSync.from_config(config, progress=progress).update()

    The final dialog is printed as a panel to stdout.
    """

    def __init__(self, *, console: Console | None = None, dialog_console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._dialog_console = dialog_console or Console()
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("[cyan]{task.description}"),
            BarColumn(bar_width=30),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=True,
        )
        self._task_id: RichTaskID | None = None

    # -- context manager --------------------------------------------------

    def __enter__(self) -> RichUpdateProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    # -- UpdateProgress implementation ------------------------------------

    def update(self, title: str, detail: str, fraction: float) -> None:
        completed = round(max(0.0, min(1.0, fraction)) * _STEPS)
        description = escape(f"{title}: {detail}")
        if self._task_id is None:
            self._task_id = self._progress.add_task(description, total=_STEPS, completed=completed)
        else:
            self._progress.update(self._task_id, description=description, completed=completed)

    def clear(self) -> None:
        if self._task_id is None:
            return
        self._progress.remove_task(self._task_id)
        self._task_id = None

    def display(self, title: str, message: str) -> None:
        self._dialog_console.print(Panel(Text(message), title=Text(title), expand=False))
