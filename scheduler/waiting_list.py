"""
Ordered waiting list — the queue of jobs that want a core.

Unlike the heap-based queues a job-queue server would use, this list
must be index-addressable (the engine and the debug view walk it by
position) and must keep a STABLE order among jobs the policy can't tell
apart. A heap gives neither, so this is a plain Python list kept sorted
by ordered insertion.

Insertion rule:
    Scan from the front. The new job goes immediately before the first
    element the comparator ranks GREATER than it. If there is none, it
    is appended. UNORDERED counts as "not greater", so a job always
    lands behind every equally-ranked job already waiting.

For Round Robin the comparator is always UNORDERED, so every insert is
an append: a plain FIFO queue.

Complexity:
- insert:     O(n) comparisons + O(n) list shift
- pop_front:  O(n) list shift
- peek/at:    O(1)
- remove_all: O(n), matches by identity (`is`), never by comparator

Waiting sets in a CPU scheduler are small, so O(n) is fine here.
Not thread-safe: the engine processes one event at a time.
"""

from typing import Callable, Iterator, Optional

from models.enums import Preference
from models.errors import IndexOutOfRangeError
from models.job import Job

Comparator = Callable[[Job, Job], Preference]


class OrderedWaitingList:

    def __init__(self, compare: Comparator):
        self._compare = compare
        self._items: list[Job] = []

    def insert(self, job: Job) -> int:
        """Place `job` by the comparator. Returns the zero-based index it landed at."""
        for index, existing in enumerate(self._items):
            if self._compare(existing, job) is Preference.GREATER:
                self._items.insert(index, job)
                return index
        self._items.append(job)
        return len(self._items) - 1

    def peek_front(self) -> Optional[Job]:
        return self._items[0] if self._items else None

    def pop_front(self) -> Optional[Job]:
        return self._items.pop(0) if self._items else None

    def at(self, index: int) -> Optional[Job]:
        """Job at `index`, or None when the position doesn't exist."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def remove_all(self, job: Job) -> int:
        """Remove every occurrence of this exact job object. Returns how many went."""
        before = len(self._items)
        self._items = [item for item in self._items if item is not job]
        return before - len(self._items)

    def remove_at(self, index: int) -> Optional[Job]:
        """Remove and return the job at `index`, or None when the position doesn't exist."""
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> list[Job]:
        """Empty the list and hand back whatever was still waiting."""
        drained, self._items = self._items, []
        return drained

    def __getitem__(self, index: int) -> Job:
        # Strict access for callers that treat a bad position as a bug
        job = self.at(index)
        if job is None:
            raise IndexOutOfRangeError(index, len(self._items))
        return job

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._items))

    def __contains__(self, job: object) -> bool:
        return any(item is job for item in self._items)
