"""
File containing custom errors raised by the entropy analyzer.
"""

class SourceUnavailableError(OSError):
    """Raised when a byte source cannot be opened or read. Carries the source name for reporting."""

    def __init__(self, source_name, reason):
        super().__init__(source_name, reason)
        self.source_name = source_name
        self.reason = reason

    def __str__(self):
        return f"{self.source_name}: {self.reason}"

class ChunkOverflowError(AssertionError):
    """Raised when a chunk accumulates more than chunk_size bytes before being finalized. Always a bug in the read loop."""
    pass

class AnalyzerStateError(RuntimeError):
    """Raised when an analyzer is used outside of the state required by the called method"""
    pass
