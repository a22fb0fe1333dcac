"""
Statistics accumulator — running sums over completed jobs.

For each completion with arrival a, finish f, burst b and first dispatch s:

    turnaround += f - a
    waiting    += (f - a) - b
    response   += s - a

Waiting time is derived from turnaround instead of being tracked per
interruption: a job receives exactly `b` units of service no matter how
many times it was preempted, so everything else between arrival and
finish was spent waiting.
"""

from dataclasses import dataclass

from models.errors import NoCompletedJobsError


@dataclass
class StatisticsAccumulator:
    waiting_sum: float = 0.0
    response_sum: float = 0.0
    turnaround_sum: float = 0.0
    completed_count: int = 0

    def record(self, arrival_time: float, finish_time: float,
               burst_time: float, first_dispatch_time: float) -> None:
        turnaround = finish_time - arrival_time
        self.turnaround_sum += turnaround
        self.waiting_sum += turnaround - burst_time
        self.response_sum += first_dispatch_time - arrival_time
        self.completed_count += 1

    def _average(self, total: float) -> float:
        if self.completed_count == 0:
            raise NoCompletedJobsError("No job has completed yet")
        return total / self.completed_count

    def average_waiting(self) -> float:
        return self._average(self.waiting_sum)

    def average_turnaround(self) -> float:
        return self._average(self.turnaround_sum)

    def average_response(self) -> float:
        return self._average(self.response_sum)
