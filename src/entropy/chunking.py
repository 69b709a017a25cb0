from dataclasses import dataclass, field
from numbers import Integral
from typing import List, Optional
from src.entropy.stats import FrequencyTable
from src.utils.exceptions import ChunkOverflowError

def validate_chunk_size(chunk_size: Optional[int]) -> Optional[int]:
    if chunk_size is None:
        return None
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, Integral) or chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")
    return int(chunk_size)

@dataclass
class Chunk:
    table: FrequencyTable = field(default_factory=FrequencyTable)

    @property
    def size(self) -> int:
        return self.table.total

class ChunkTracker:
    """
    Splits a byte stream into fixed-size windows and keeps only the entropy of each.
    The final window may be shorter than chunk_size.
    """

    def __init__(self, chunk_size: int) -> None:
        self.chunk_size = validate_chunk_size(chunk_size)
        if self.chunk_size is None:
            raise ValueError("chunk_size is required for chunk tracking")
        self.current = Chunk()
        self.entropies: List[float] = []

    def remaining(self) -> int:
        return self.chunk_size - self.current.size

    def ingest(self, block) -> None:
        self.current.table.update(block)
        if self.current.size > self.chunk_size:
            raise ChunkOverflowError(
                f"chunk holds {self.current.size} bytes, limit is {self.chunk_size}"
            )
        if self.current.size == self.chunk_size:
            self._close_current()

    def flush(self) -> None:
        if self.current.size:
            self._close_current()

    def _close_current(self) -> None:
        self.entropies.append(self.current.table.entropy())
        self.current = Chunk()
