"""
Policy factory — maps scheme names to policy classes (the Policy Table).

This is the Factory pattern: instead of writing if/elif chains everywhere,
there is ONE place that knows how to build a policy for a scheme.

    Scheme | ranks by                 | preemptive
    -------+--------------------------+-----------
    FCFS   | arrival_time             | no
    RR     | nothing (FIFO)           | yes (quantum)
    SJF    | burst_time               | no
    PSJF   | remaining_time           | yes
    PRI    | priority                 | no
    PPRI   | priority                 | yes
"""

from typing import Union

from models.enums import SchedulingScheme
from models.errors import ConfigurationError
from scheduler.base import Policy
from scheduler.fcfs import FCFSPolicy
from scheduler.sjf import SJFPolicy, PreemptiveSJFPolicy
from scheduler.priority import PriorityPolicy, PreemptivePriorityPolicy
from scheduler.round_robin import RoundRobinPolicy


_REGISTRY: dict[SchedulingScheme, type[Policy]] = {
    SchedulingScheme.FCFS: FCFSPolicy,
    SchedulingScheme.RR: RoundRobinPolicy,
    SchedulingScheme.SJF: SJFPolicy,
    SchedulingScheme.PSJF: PreemptiveSJFPolicy,
    SchedulingScheme.PRI: PriorityPolicy,
    SchedulingScheme.PPRI: PreemptivePriorityPolicy,
}


def parse_scheme(scheme: Union[SchedulingScheme, str]) -> SchedulingScheme:
    """Accept an enum member or its name/value in any case ("PSJF", "psjf")."""
    if isinstance(scheme, SchedulingScheme):
        return scheme
    try:
        return SchedulingScheme(str(scheme).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown scheduling scheme: '{scheme}'. "
            f"Available: {[s.value for s in SchedulingScheme]}"
        ) from None


def create_policy(scheme: Union[SchedulingScheme, str]) -> Policy:
    """Create the policy for a scheme. Raises ConfigurationError if unknown."""
    cls = _REGISTRY.get(parse_scheme(scheme))
    if cls is None:
        raise ConfigurationError(f"No policy registered for scheme: {scheme}")
    return cls()


def available_schemes() -> list[Policy]:
    """One policy instance per registered scheme, in table order."""
    return [cls() for cls in _REGISTRY.values()]
