import math
from collections import Counter

def reference_entropy(data: bytes) -> float:
    """Plain-Python Shannon entropy, used to check the numpy implementation."""
    if not data:
        return 0.0
    total = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy

def half_zero_distribution() -> bytes:
    """
    10240 bytes: 5120 zeros, then bytes 1..128 forty times each.
    p(0) = 1/2 and p(1..128) = 1/256, so the entropy is 0.5 + 128 * 8 / 256 = 4.5 bits.
    """
    return bytes(5120) + bytes(range(1, 129)) * 40

def uniform_distribution(repeat: int = 40) -> bytes:
    return bytes(range(256)) * repeat

def write_file(directory, name: str, data: bytes):
    path = directory / name
    path.write_bytes(data)
    return path

class TrickleReader:
    """Returns at most `step` bytes per read, like a slow pipe."""

    def __init__(self, data: bytes, step: int) -> None:
        self.data = data
        self.pos = 0
        self.step = step
        self.requests = []

    def read(self, n=-1):
        self.requests.append(n)
        size = self.step if n is None or n < 0 else min(n, self.step)
        chunk = self.data[self.pos:self.pos + size]
        self.pos += len(chunk)
        return chunk

class GreedyReader(TrickleReader):
    """Ignores the requested size and always returns `step` bytes."""

    def read(self, n=-1):
        chunk = self.data[self.pos:self.pos + self.step]
        self.pos += len(chunk)
        return chunk

class FailingReader(TrickleReader):
    """Serves `fail_after` bytes, then raises the given OSError."""

    def __init__(self, data: bytes, fail_after: int, error: OSError) -> None:
        super().__init__(data, step=fail_after)
        self.error = error

    def read(self, n=-1):
        if self.pos >= self.step:
            raise self.error
        return super().read(n)
