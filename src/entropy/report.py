import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import numpy as np
from src.entropy.stats import NUM_SYMBOLS

# Number of set bits in each 4-bit nibble
NIBBLE_ONES = np.array([0, 1, 1, 2, 1, 2, 2, 3, 1, 2, 2, 3, 2, 3, 3, 4], dtype=np.int64)
_BYTE_VALUES = np.arange(NUM_SYMBOLS)
BYTE_ONES = NIBBLE_ONES[_BYTE_VALUES & 0xF] + NIBBLE_ONES[_BYTE_VALUES >> 4]

@dataclass(frozen=True, eq=False)
class Report:
    """
    Result of draining one byte source. Built once by StreamAnalyzer, never mutated.

    The derived statistics (mean, std_dev, byte_min, byte_max, random_walk) are
    computed from the frequency table on each call.
    """
    source_name: str
    total_bytes: int
    entropy: float
    frequency_table: np.ndarray
    chunk_entropies: Tuple[float, ...] = ()
    chunk_size: Optional[int] = None

    def __post_init__(self):
        table = np.array(self.frequency_table, dtype=np.uint64)
        if table.shape != (NUM_SYMBOLS,):
            raise ValueError(f"frequency_table must hold {NUM_SYMBOLS} counts, got shape {table.shape}")
        table.setflags(write=False)
        object.__setattr__(self, "frequency_table", table)
        object.__setattr__(self, "chunk_entropies", tuple(float(h) for h in self.chunk_entropies))

    def __setstate__(self, state):
        # unpickled arrays come back writeable
        self.__dict__.update(state)
        self.frequency_table.setflags(write=False)

    def mean(self) -> float:
        """Expected count per byte value under a uniform distribution, not the mean of the counts."""
        return self.total_bytes / NUM_SYMBOLS

    def std_dev(self) -> float:
        mean = self.mean()
        deviations = self.frequency_table.astype(np.float64) - mean
        return math.sqrt(float(np.dot(deviations, deviations)) / (NUM_SYMBOLS - 1))

    def byte_min(self) -> Tuple[int, int]:
        """Least frequent byte and its count. Ties go to the lowest byte value."""
        byte = int(np.argmin(self.frequency_table))
        return byte, int(self.frequency_table[byte])

    def byte_max(self) -> Tuple[int, int]:
        """Most frequent byte and its count. Ties go to the highest byte value."""
        byte = NUM_SYMBOLS - 1 - int(np.argmax(self.frequency_table[::-1]))
        return byte, int(self.frequency_table[byte])

    def random_walk(self) -> float:
        """
        Walk one step right for every 1 bit and one step left for every 0 bit,
        normalized to [-1, +1]. Returns 0.0 for an empty stream.
        """
        if self.total_bytes == 0:
            return 0.0
        steps = (BYTE_ONES - 4) * 2
        position = sum(int(s) * int(c) for s, c in zip(steps, self.frequency_table))
        return position / self.total_bytes / 8

    def summary(self) -> Dict[str, object]:
        byte_min, count_min = self.byte_min()
        byte_max, count_max = self.byte_max()
        return {
            "source_name": self.source_name,
            "total_bytes": self.total_bytes,
            "entropy": self.entropy,
            "mean": self.mean(),
            "std_dev": self.std_dev(),
            "byte_min": byte_min,
            "count_min": count_min,
            "byte_max": byte_max,
            "count_max": count_max,
            "random_walk": self.random_walk(),
            "chunks": len(self.chunk_entropies),
        }
