"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code
that uses them. The SchedulerEngine only knows about Policy: it asks
compare() where a job belongs and checks `preemptive` on arrival, without
caring whether it's FCFS, PSJF, etc.

A policy is exactly two things:
- compare(a, b): LESS if `a` should run before `b`, GREATER if after,
  UNORDERED if the policy can't tell them apart
- preemptive: whether an arriving job may kick a running one off its core

To add a new scheduling policy:
1. Create a new class that inherits Policy
2. Implement compare(), preemptive and scheme
3. Register it in scheduler/registry.py

Policies never mutate the jobs they compare.
"""

from abc import ABC, abstractmethod

from models.enums import Preference, SchedulingScheme
from models.job import Job


def compare_keys(left, right) -> Preference:
    """Three-way comparison of two sort keys, ascending."""
    if left < right:
        return Preference.LESS
    if left > right:
        return Preference.GREATER
    return Preference.UNORDERED


class Policy(ABC):

    @abstractmethod
    def compare(self, a: Job, b: Job) -> Preference:
        """Rank `a` against `b` under this policy."""
        ...

    @property
    @abstractmethod
    def preemptive(self) -> bool:
        """True if an arrival may preempt a running job."""
        ...

    @property
    @abstractmethod
    def scheme(self) -> SchedulingScheme:
        """The scheme this policy implements (e.g., SchedulingScheme.PSJF)."""
        ...

    @property
    def uses_quantum(self) -> bool:
        """True if the event source must deliver quantum-expiry events."""
        return False

    def prefers(self, a: Job, b: Job) -> bool:
        """Strict preference: `a` would be placed ahead of `b`."""
        return self.compare(a, b) is Preference.LESS

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.scheme.value} preemptive={self.preemptive}>"
