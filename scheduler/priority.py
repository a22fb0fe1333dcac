"""
Priority policies (PRI and PPRI).

Jobs with the lowest priority NUMBER run first (0 or 1 = most urgent).
Both variants share the same comparator; PPRI is additionally
preemptive, so an urgent arrival takes the core of the least urgent
running job.

Equal priorities are unordered, so ties keep arrival order.

Downside: same starvation problem as SJF. Aging (gradually raising the
priority of waiting jobs) would fix it, but static priorities are part
of the contract here.
"""

from models.enums import Preference, SchedulingScheme
from models.job import Job
from scheduler.base import Policy, compare_keys


class PriorityPolicy(Policy):

    def compare(self, a: Job, b: Job) -> Preference:
        return compare_keys(a.priority, b.priority)

    @property
    def preemptive(self) -> bool:
        return False

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.PRI


class PreemptivePriorityPolicy(PriorityPolicy):

    @property
    def preemptive(self) -> bool:
        return True

    @property
    def scheme(self) -> SchedulingScheme:
        return SchedulingScheme.PPRI
