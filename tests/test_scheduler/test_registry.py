"""Tests for the policy table (scheme → policy)."""

import pytest

from models.enums import SchedulingScheme
from models.errors import ConfigurationError
from scheduler.registry import available_schemes, create_policy, parse_scheme
from scheduler.fcfs import FCFSPolicy
from scheduler.round_robin import RoundRobinPolicy
from scheduler.sjf import PreemptiveSJFPolicy


@pytest.mark.parametrize("scheme, preemptive", [
    (SchedulingScheme.FCFS, False),
    (SchedulingScheme.RR, True),
    (SchedulingScheme.SJF, False),
    (SchedulingScheme.PSJF, True),
    (SchedulingScheme.PRI, False),
    (SchedulingScheme.PPRI, True),
])
def test_policy_table(scheme, preemptive):
    policy = create_policy(scheme)
    assert policy.scheme is scheme
    assert policy.preemptive is preemptive


def test_accepts_names_in_any_case():
    assert isinstance(create_policy("fcfs"), FCFSPolicy)
    assert isinstance(create_policy("PSJF"), PreemptiveSJFPolicy)
    assert isinstance(create_policy(" rr "), RoundRobinPolicy)
    assert parse_scheme("Ppri") is SchedulingScheme.PPRI


def test_unknown_scheme_is_configuration_error():
    with pytest.raises(ConfigurationError, match="Unknown scheduling scheme"):
        create_policy("lottery")


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        create_policy("")


def test_only_round_robin_uses_quantum():
    uses_quantum = [p.scheme for p in available_schemes() if p.uses_quantum]
    assert uses_quantum == [SchedulingScheme.RR]


def test_available_schemes_covers_every_scheme():
    assert [p.scheme for p in available_schemes()] == list(SchedulingScheme)
