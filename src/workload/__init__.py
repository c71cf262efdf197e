#!/usr/bin/env python3

"""Address workload generation for TLB/cache simulations."""

from .patterns import (
    AddressGenerator,
    SequentialSegmentGenerator,
    ReuseWeightedAssetGenerator,
    CyclicSegmentGenerator,
    service_address,
    create_workload,
)

__all__ = [
    'AddressGenerator',
    'SequentialSegmentGenerator',
    'ReuseWeightedAssetGenerator',
    'CyclicSegmentGenerator',
    'service_address',
    'create_workload',
]
