"""
Workload traces — the list of jobs a simulation feeds to the scheduler.

Trace format (CSV, one job per row):

    arrival_time,burst_time,priority
    0,5,1
    2,3,2

- The header row is optional
- Blank lines and lines starting with '#' are skipped
- priority may be omitted (defaults to 0)
- Job ids are assigned 0, 1, 2, ... in file order

Example:
    jobs = load_trace("traces/proc1.csv")
"""

import csv
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

from models.errors import ConfigurationError

logger = logging.getLogger(__name__)

_HEADER = ("arrival_time", "burst_time", "priority")


@dataclass(frozen=True)
class JobSpec:
    """One job as the event source knows it, before the scheduler sees it."""
    job_id: int
    arrival_time: float
    burst_time: float
    priority: int = 0

    def __post_init__(self):
        for name in ("arrival_time", "burst_time"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigurationError(
                    f"Job {self.job_id}: {name} must be a finite number, got {value}"
                )
        if self.arrival_time < 0:
            raise ConfigurationError(
                f"Job {self.job_id}: arrival_time must be >= 0, got {self.arrival_time}"
            )
        if self.burst_time <= 0:
            raise ConfigurationError(
                f"Job {self.job_id}: burst_time must be > 0, got {self.burst_time}"
            )


def _parse_number(raw: str, line_no: int, column: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"Line {line_no}: {column} is not a number: '{raw}'"
        ) from None
    if not math.isfinite(value):
        raise ConfigurationError(
            f"Line {line_no}: {column} must be a finite number, got '{raw}'"
        )
    # Keep integral values as ints so tables print "5", not "5.0"
    return int(value) if value.is_integer() else value


def parse_trace(lines: Iterable[str]) -> list[JobSpec]:
    """Parse trace rows from any iterable of text lines."""
    jobs: list[JobSpec] = []
    for line_no, row in enumerate(csv.reader(lines), start=1):
        cells = [cell.strip() for cell in row]
        if not cells or not any(cells) or cells[0].startswith("#"):
            continue
        if tuple(cell.lower() for cell in cells[:2]) == _HEADER[:2]:
            continue
        if len(cells) not in (2, 3):
            raise ConfigurationError(
                f"Line {line_no}: expected 'arrival_time,burst_time[,priority]', got {row}"
            )

        arrival = _parse_number(cells[0], line_no, "arrival_time")
        burst = _parse_number(cells[1], line_no, "burst_time")
        priority = 0
        if len(cells) == 3:
            priority = _parse_number(cells[2], line_no, "priority")
            if not isinstance(priority, int):
                raise ConfigurationError(
                    f"Line {line_no}: priority must be an integer, got '{cells[2]}'"
                )
        jobs.append(JobSpec(job_id=len(jobs), arrival_time=arrival,
                            burst_time=burst, priority=priority))
    return jobs


def load_trace(path: Union[str, Path]) -> list[JobSpec]:
    """Read a trace file from disk."""
    path = Path(path)
    with path.open(newline="", encoding="utf-8") as f:
        jobs = parse_trace(f)
    logger.info(f"Loaded {len(jobs)} jobs from {path}")
    return jobs
