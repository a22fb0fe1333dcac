"""
CLI entry point for comparing scheduling schemes on one trace.

Usage:
    python -m benchmarks.run_benchmark traces/proc1.csv                 # all schemes, 1 core
    python -m benchmarks.run_benchmark traces/proc1.csv --scheme psjf   # single scheme
    python -m benchmarks.run_benchmark traces/proc1.csv --cores 4 --quantum 2
    python -m benchmarks.run_benchmark traces/proc1.csv --json          # raw results
"""

import argparse
import json
import logging

from config.settings import settings
from models.enums import SchedulingScheme
from benchmarks.comparison import SchemeComparison
from simulator.workload import load_trace

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main():
    parser = argparse.ArgumentParser(description="Compare CPU scheduling schemes on a trace")
    parser.add_argument("trace", help="CSV trace: arrival_time,burst_time[,priority] per line")
    parser.add_argument(
        "--cores", type=int, default=settings.DEFAULT_NUM_CORES,
        help=f"Number of cores (default: {settings.DEFAULT_NUM_CORES})",
    )
    parser.add_argument(
        "--scheme", type=str, default="all",
        choices=[s.value for s in SchedulingScheme] + ["all"],
        help="Which scheme to run (default: all)",
    )
    parser.add_argument(
        "--quantum", type=float, default=None,
        help=f"Round Robin time slice (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument("--json", action="store_true", help="Print raw JSON results")
    args = parser.parse_args()

    jobs = load_trace(args.trace)
    comparison = SchemeComparison(jobs, num_cores=args.cores, quantum=args.quantum)

    if args.scheme == "all":
        results = comparison.run_all()
    else:
        results = [comparison.run(SchedulingScheme(args.scheme))]

    if args.json:
        print(json.dumps(results, indent=2))
        return

    print(f"=== {len(jobs)} jobs on {args.cores} core(s) ===\n")
    print("{:<8} {:>10} {:>12} {:>10} {:>10}".format(
        "Scheme", "Avg wait", "Avg turnar.", "Avg resp", "Makespan"
    ))
    print("-" * 54)
    for r in results:
        print("{:<8} {:>10.2f} {:>12.2f} {:>10.2f} {:>10}".format(
            r["scheme"], r["avg_waiting_time"], r["avg_turnaround_time"],
            r["avg_response_time"], r["makespan"],
        ))


if __name__ == "__main__":
    main()
