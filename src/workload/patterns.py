"""
Synthetic address workloads for TLB/cache simulation.

Implements three memory access archetypes:
- Sequential segment walk (streaming machine-learning workload)
- Reuse-weighted assets (AAA games, heavy locality)
- Cyclic service segments (stateless microservices)
"""

import random
from typing import Dict, Iterator, List, Sequence

from addrspace import format_address, MAX_ADDRESS, RESERVED_SEGMENTS


def _check_size(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def _check_probability(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")
    return float(value)


class AddressGenerator:
    """
    Base class for address workloads.

    Subclasses implement _next_value() to advance their state by one
    step and _reset_state() to (re)build it from the construction
    parameters. Each generator owns its own random stream, so two
    generators never influence each other.
    """

    def __init__(self, seed: int = None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.emitted = 0

    def _reset_state(self):
        raise NotImplementedError

    def _next_value(self) -> int:
        raise NotImplementedError

    @property
    def parameters(self) -> Dict[str, object]:
        """Construction parameters, for status output"""
        return {}

    def next_address(self) -> str:
        """Advance one step and return the formatted address"""
        value = self._next_value()
        self.emitted += 1
        return format_address(value)

    def generate(self, count: int) -> List[str]:
        """
        Generate the next `count` addresses of the workload.

        Args:
            count: Number of addresses (0 yields an empty list)

        Returns:
            List of "0x"-prefixed hex address strings, in emission order
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Count must be a non-negative integer, got {count!r}")
        return [self.next_address() for _ in range(count)]

    def reset(self):
        """Return to the post-construction state (same seed, same sequence)"""
        self.rng = random.Random(self.seed)
        self.emitted = 0
        self._reset_state()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next_address()

    def print_status(self):
        """Print generator parameters and progress"""
        print(f"\n=== {self.__class__.__name__} ===")
        for name, value in self.parameters.items():
            print(f"  {name}: {value}")
        print(f"  seed: {self.seed}")
        print(f"  emitted: {self.emitted}")


class SequentialSegmentGenerator(AddressGenerator):
    """
    Sequential segment walk.

    Steps through the address space one segment at a time, starting
    above the reserved segments and wrapping back there once the end
    of the space is reached. Models streaming ML training data.

    Args:
        space_size: Total addressable range (bytes)
        segment_size: Step between consecutive addresses (bytes)
    """

    def __init__(self, space_size: int, segment_size: int, seed: int = None):
        super().__init__(seed)
        self.space_size = _check_size("space_size", space_size)
        self.segment_size = _check_size("segment_size", segment_size)
        if space_size > MAX_ADDRESS + 1:
            raise ValueError(f"space_size exceeds the 64-bit address space: {space_size}")
        if space_size <= self.start_address:
            raise ValueError(
                f"space_size {space_size:#x} leaves no room above the "
                f"{RESERVED_SEGMENTS} reserved segments ({self.start_address:#x})"
            )
        # Aligned space: one pass is exactly (space_size - start) / segment_size steps
        if space_size % segment_size:
            raise ValueError(
                f"space_size {space_size:#x} is not a multiple of segment_size {segment_size:#x}"
            )
        self._reset_state()

    @property
    def start_address(self) -> int:
        """First address after the reserved segments"""
        return RESERVED_SEGMENTS * self.segment_size

    @property
    def parameters(self):
        return {"space_size": hex(self.space_size), "segment_size": hex(self.segment_size)}

    def _reset_state(self):
        self.current_address = self.start_address

    def step_points(self) -> Iterator[int]:
        """All addresses of one pass, start_address up to space_size"""
        return iter(range(self.start_address, self.space_size, self.segment_size))

    def _next_value(self) -> int:
        # Wrap check comes before emission
        if self.current_address >= self.space_size:
            self.current_address = self.start_address
        value = self.current_address
        self.current_address += self.segment_size
        return value


class ReuseWeightedAssetGenerator(AddressGenerator):
    """
    Reuse-weighted asset access.

    Most accesses revisit an asset that was already loaded; the rest
    mint a new asset address inside a randomly chosen segment tier.
    Models games streaming textures and meshes with strong locality.

    Args:
        asset_count: Number of assets minted up front
        reuse_probability: Chance of revisiting an emitted address (0.0-1.0)
        segment_sizes: Candidate segment sizes, one per tier
    """

    def __init__(
        self,
        asset_count: int,
        reuse_probability: float,
        segment_sizes: Sequence[int],
        seed: int = None
    ):
        super().__init__(seed)
        if isinstance(asset_count, bool) or not isinstance(asset_count, int) or asset_count < 0:
            raise ValueError(f"asset_count must be a non-negative integer, got {asset_count!r}")
        self.asset_count = asset_count
        self.reuse_probability = _check_probability("reuse_probability", reuse_probability)
        if not isinstance(segment_sizes, (list, tuple)):
            raise ValueError(f"segment_sizes must be a list of sizes, got {segment_sizes!r}")
        self.segment_sizes = [_check_size("segment size", size) for size in segment_sizes]
        if not self.segment_sizes:
            raise ValueError("segment_sizes must not be empty")
        self._reset_state()

    @property
    def parameters(self):
        return {
            "asset_count": self.asset_count,
            "reuse_probability": self.reuse_probability,
            "segment_sizes": [hex(size) for size in self.segment_sizes],
        }

    def _reset_state(self):
        # Up-front assets draw from the stream but are not served directly
        self.assets = [self._mint_asset() for _ in range(self.asset_count)]
        self.history: List[int] = []

    def _mint_asset(self) -> int:
        """Random offset inside a randomly chosen segment tier"""
        segment_index = self.rng.randrange(len(self.segment_sizes))
        segment_size = self.segment_sizes[segment_index]
        offset = self.rng.randrange(segment_size)
        return segment_index * segment_size + offset

    def _next_value(self) -> int:
        if self.rng.random() < self.reuse_probability and self.history:
            return self.rng.choice(self.history)

        value = self._mint_asset()
        self.history.append(value)
        return value


def service_address(
    current_segment: int,
    segment_size: int,
    running_count: int,
    service_count: int
) -> int:
    """
    Address of a service access.

    The offset inside the segment depends on how many service
    addresses have been produced so far (running_count), not only on
    the segment being visited.
    """
    return current_segment * segment_size + (running_count - service_count + current_segment)


class CyclicSegmentGenerator(AddressGenerator):
    """
    Round-robin service segments.

    Each call moves to the next service segment, wrapping to segment 0
    after the last one. Models a fixed pool of stateless services.

    Args:
        service_count: Number of services (segments in the cycle)
        dependency_probability: Reserved for dependency weighting (0.0-1.0),
            not used when generating addresses
        segment_size: Bytes per service segment
    """

    def __init__(
        self,
        service_count: int,
        dependency_probability: float,
        segment_size: int,
        seed: int = None
    ):
        super().__init__(seed)
        self.service_count = _check_size("service_count", service_count)
        self.dependency_probability = _check_probability(
            "dependency_probability", dependency_probability
        )
        self.segment_size = _check_size("segment_size", segment_size)
        self._reset_state()

    @property
    def parameters(self):
        return {
            "service_count": self.service_count,
            "dependency_probability": self.dependency_probability,
            "segment_size": hex(self.segment_size),
        }

    def _reset_state(self):
        self.current_segment = 0
        # Built while current_segment is 0, so every entry lies in segment 0
        self.services = [
            self.current_segment * self.segment_size + index
            for index in range(self.service_count)
        ]
        self.running_count = len(self.services)

    def _next_value(self) -> int:
        self.current_segment = (self.current_segment + 1) % self.service_count
        value = service_address(
            self.current_segment, self.segment_size,
            self.running_count, self.service_count
        )
        self.running_count += 1
        return value


# Helper function to create workload by name
def create_workload(workload_type: str, **kwargs) -> AddressGenerator:
    """
    Factory function to create address workloads.

    Args:
        workload_type: One of "machine_learning", "aaa_games", "microservice"
        **kwargs: Workload-specific parameters

    Returns:
        AddressGenerator instance
    """
    workloads = {
        "machine_learning": SequentialSegmentGenerator,
        "aaa_games": ReuseWeightedAssetGenerator,
        "microservice": CyclicSegmentGenerator,
    }

    if workload_type not in workloads:
        raise ValueError(f"Unknown workload type: {workload_type}. "
                         f"Choose from: {list(workloads.keys())}")

    return workloads[workload_type](**kwargs)
