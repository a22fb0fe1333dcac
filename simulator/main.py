"""
Simulator entry point — run one trace under one scheme.

Usage:
    python -m simulator.main traces/proc1.csv                       # defaults from settings
    python -m simulator.main traces/proc1.csv --cores 2 --scheme psjf
    python -m simulator.main traces/proc1.csv --scheme rr --quantum 3
    python -m simulator.main traces/proc1.csv --scheme ppri --verbose

With --verbose the queue is logged after every event, e.g.:
    t=2: 1(0) 0(-1)
meaning job 1 runs on core 0 and job 0 is waiting.
"""

import argparse
import logging
import sys

from config.settings import settings
from models.enums import SchedulingScheme
from models.errors import SchedulerError
from simulator.runner import SimulationResult, simulate
from simulator.workload import load_trace

logger = logging.getLogger(__name__)


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling over a job trace")
    parser.add_argument("trace", help="CSV trace: arrival_time,burst_time[,priority] per line")
    parser.add_argument(
        "--cores", type=int, default=settings.DEFAULT_NUM_CORES,
        help=f"Number of cores (default: {settings.DEFAULT_NUM_CORES})",
    )
    parser.add_argument(
        "--scheme", type=str, default=settings.DEFAULT_SCHEDULING_SCHEME,
        choices=[s.value for s in SchedulingScheme],
        help=f"Scheduling scheme (default: {settings.DEFAULT_SCHEDULING_SCHEME})",
    )
    parser.add_argument(
        "--quantum", type=float, default=None,
        help=f"Round Robin time slice (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument("--verbose", action="store_true", help="Log the queue after every event")
    return parser.parse_args(argv)


def print_result(result: SimulationResult) -> None:
    print(f"=== {result.scheme.value.upper()} on {result.num_cores} core(s) ===")
    if result.quantum is not None:
        print(f"Quantum: {result.quantum}")

    print("\n{:>6} {:>8} {:>6} {:>6} {:>8} {:>8} {:>8} {:>8} {:>10}".format(
        "Job", "Arrival", "Burst", "Prio", "Start", "Finish", "Wait", "Resp", "Turnaround"
    ))
    print("-" * 78)
    for o in result.outcomes:
        print("{:>6} {:>8} {:>6} {:>6} {:>8} {:>8} {:>8} {:>8} {:>10}".format(
            o.job_id, o.arrival_time, o.burst_time, o.priority, o.first_start_time,
            o.finish_time, o.waiting_time, o.response_time, o.turnaround_time,
        ))

    print(f"\nAverage waiting time:    {result.average_waiting_time:.2f}")
    print(f"Average turnaround time: {result.average_turnaround_time:.2f}")
    print(f"Average response time:   {result.average_response_time:.2f}")
    print(f"Makespan:                {result.makespan}")


def main(argv=None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        jobs = load_trace(args.trace)
        result = simulate(jobs, args.cores, args.scheme, args.quantum)
    except (SchedulerError, OSError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
