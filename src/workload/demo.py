"""
Print a short sample of each workload.

Usage:
    tlb-workloads [--seed N]
"""

import argparse
from typing import List, Sequence

from .patterns import create_workload

DEMO_COUNT = 5

# Label -> (workload type, parameters)
WORKLOADS = {
    "Machine Learning Workload": (
        "machine_learning",
        {"space_size": 1 << 32, "segment_size": 0x1000},   # 32-bit space, 4K segments
    ),
    "AAA Games Workload": (
        "aaa_games",
        {"asset_count": 20, "reuse_probability": 0.2,
         "segment_sizes": [0x800, 0x1000, 0x2000]},       # Variable-sized segments
    ),
    "Stateless Microservice Workload": (
        "microservice",
        {"service_count": 10, "dependency_probability": 0.3,
         "segment_size": 0x800},                          # Fixed-sized segments
    ),
}


def format_line(label: str, addresses: Sequence[str]) -> str:
    return f"{label}: " + " ".join(addresses)


def run_demo(count: int = DEMO_COUNT, seed: int = None) -> List[str]:
    """Generate `count` addresses per workload, one output line each"""
    lines = []
    for label, (workload_type, params) in WORKLOADS.items():
        generator = create_workload(workload_type, seed=seed, **params)
        lines.append(format_line(label, generator.generate(count)))
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sample synthetic TLB/cache workloads")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random workloads (default: unseeded)")
    args = parser.parse_args(argv)

    for line in run_demo(seed=args.seed):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
