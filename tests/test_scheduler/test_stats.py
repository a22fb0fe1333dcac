"""Tests for the statistics accumulator."""

import pytest

from models.errors import NoCompletedJobsError
from scheduler.stats import StatisticsAccumulator


def test_single_completion():
    stats = StatisticsAccumulator()
    stats.record(arrival_time=2, finish_time=8, burst_time=3, first_dispatch_time=5)

    assert stats.turnaround_sum == 6
    assert stats.waiting_sum == 3
    assert stats.response_sum == 3
    assert stats.completed_count == 1


def test_averages():
    stats = StatisticsAccumulator()
    stats.record(arrival_time=0, finish_time=5, burst_time=5, first_dispatch_time=0)
    stats.record(arrival_time=2, finish_time=8, burst_time=3, first_dispatch_time=5)

    assert stats.average_waiting() == 1.5
    assert stats.average_response() == 1.5
    assert stats.average_turnaround() == 5.5


def test_turnaround_equals_waiting_plus_service():
    """Service time is consumed exactly once, however often a job was preempted."""
    stats = StatisticsAccumulator()
    completions = [(0, 7, 5, 0), (2, 4, 2, 2), (1, 20, 6, 9), (3, 11, 1, 10)]
    for arrival, finish, burst, first in completions:
        stats.record(arrival, finish, burst, first)

    total_burst = sum(burst for _, _, burst, _ in completions)
    assert stats.turnaround_sum == stats.waiting_sum + total_burst
    assert stats.waiting_sum == stats.turnaround_sum - total_burst


@pytest.mark.parametrize("query", ["average_waiting", "average_turnaround", "average_response"])
def test_average_before_any_completion_raises(query):
    with pytest.raises(NoCompletedJobsError):
        getattr(StatisticsAccumulator(), query)()
