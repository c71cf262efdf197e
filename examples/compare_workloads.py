"""
Workload Locality Comparison

Compares the address streams of the three workloads:
- Sequential segment walk (no reuse until it wraps)
- Reuse-weighted assets at several reuse probabilities
- Cyclic service segments
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from addrspace import TraceStats
from workload import create_workload


TRACE_LENGTH = 2000
SEED = 42

experiments = [
    ("ML 4K / 1MB", "machine_learning",
     {"space_size": 1 << 20, "segment_size": 0x1000}, 0x1000),
    ("Games reuse=0.2", "aaa_games",
     {"asset_count": 20, "reuse_probability": 0.2, "segment_sizes": [0x800, 0x1000, 0x2000]}, 0x1000),
    ("Games reuse=0.8", "aaa_games",
     {"asset_count": 20, "reuse_probability": 0.8, "segment_sizes": [0x800, 0x1000, 0x2000]}, 0x1000),
    ("Games reuse=0.99", "aaa_games",
     {"asset_count": 20, "reuse_probability": 0.99, "segment_sizes": [0x800, 0x1000, 0x2000]}, 0x1000),
    ("Microservice x10", "microservice",
     {"service_count": 10, "dependency_probability": 0.3, "segment_size": 0x800}, 0x800),
]


print("Workload           | Addresses | Unique | Reuse % | Segments")
print("-" * 64)

for name, workload_type, params, segment_size in experiments:
    workload = create_workload(workload_type, seed=SEED, **params)
    stats = TraceStats.from_addresses(workload.generate(TRACE_LENGTH))
    print(f"{name:18} | {stats.total:9} | {stats.unique:6} | "
          f"{stats.reuse_ratio * 100:6.1f}% | {stats.segments_touched(segment_size):8}")

# Detailed view of the most reuse-heavy stream
workload = create_workload("aaa_games", seed=SEED, **experiments[3][2])
stats = TraceStats.from_addresses(workload.generate(TRACE_LENGTH))
workload.print_status()
stats.print_summary("Games reuse=0.99")
