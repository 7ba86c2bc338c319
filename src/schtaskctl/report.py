from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Union

from .query import TaskRecord

if TYPE_CHECKING:
    import pandas as pd

ELLIPSIS = "..."
COLUMNS = ("Task", "Status", "Next Run")


@dataclass(frozen=True)
class ReportLayout:
    name_width: int = 100
    status_width: int = 10
    next_run_width: int = 20

    def row(self, name: str, status: str, next_run: str) -> str:
        return (
            f"{name:<{self.name_width}} "
            f"{status:<{self.status_width}} "
            f"{next_run:<{self.next_run_width}}"
        )

    def shorten(self, name: str) -> str:
        limit = self.name_width - len(ELLIPSIS)
        return name[:limit] + ELLIPSIS if len(name) > limit else name


DEFAULT_LAYOUT = ReportLayout()


def format_record(record: TaskRecord, layout: ReportLayout = DEFAULT_LAYOUT) -> str:
    return layout.row(layout.shorten(record.name), record.status, record.next_run)


def format_report(
    records: Union[TaskRecord, Iterable[TaskRecord]],
    layout: ReportLayout = DEFAULT_LAYOUT,
) -> str:
    """Render records as a fixed-width table with a header row.

    A single ``TaskRecord`` is rendered like a one-element list. Every line,
    the last included, ends with a newline.
    """
    if isinstance(records, TaskRecord):
        records = [records]
    lines = [layout.row(*COLUMNS)]
    lines.extend(format_record(r, layout) for r in records)
    return "\n".join(lines) + "\n"


def records_frame(records: Iterable[TaskRecord]) -> "pd.DataFrame":
    """Tabulate records for the browser UI (needs the ``ui`` extra)."""
    import pandas as pd

    rows: List[Dict[str, Any]] = [
        {"Task": r.name, "Status": r.status, "Next Run": r.next_run} for r in records
    ]
    return pd.DataFrame(rows, columns=list(COLUMNS))
