import numpy as np

NUM_SYMBOLS = 256
MAX_ENTROPY = 8.0

def shannon_entropy(counts) -> float:
    """Entropy in bits per byte of a 256-bucket count array. An empty table has entropy 0.0."""
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0] / total
    h = 0.0 - float(np.dot(p, np.log2(p)))
    return min(max(h, 0.0), MAX_ENTROPY)

class FrequencyTable:
    __slots__ = ("bins", "total")

    def __init__(self):
        self.bins = np.zeros(NUM_SYMBOLS, dtype=np.uint64)
        self.total = 0

    def update(self, block) -> int:
        if not block:
            return 0
        data = np.frombuffer(block, dtype=np.uint8)
        self.bins += np.bincount(data, minlength=NUM_SYMBOLS).astype(np.uint64)
        self.total += data.size
        return data.size

    def entropy(self) -> float:
        return shannon_entropy(self.bins)

    def freeze(self) -> np.ndarray:
        frozen = self.bins.copy()
        frozen.setflags(write=False)
        return frozen
