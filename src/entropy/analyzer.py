import multiprocessing
from enum import Enum
from functools import partial
from typing import Iterable, List, Optional, Union
from config import settings
from src.entropy.chunking import ChunkTracker, validate_chunk_size
from src.entropy.report import Report
from src.entropy.source_reader_factory import SourceReaderFactory, STDIN_NAME, source_name_of
from src.entropy.stats import FrequencyTable
from src.utils.exceptions import AnalyzerStateError, SourceUnavailableError
from src.utils.log import get_logger

logger = get_logger(__name__)

class AnalyzerState(Enum):
    READING = "reading"
    FINALIZING = "finalizing"
    DONE = "done"

class StreamAnalyzer:
    """Single-pass, single-use conversion of one byte source into a Report."""

    def __init__(self, chunk_size: Optional[int] = None, block_size: Optional[int] = None) -> None:
        self.chunk_size = validate_chunk_size(chunk_size)
        self.block_size = block_size if block_size is not None else settings.read_block_size
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive, got {self.block_size}")
        self.table = FrequencyTable()
        self.chunks = ChunkTracker(self.chunk_size) if self.chunk_size is not None else None
        self.state = AnalyzerState.READING
        self.report: Optional[Report] = None
        self._claimed = False

    def analyze(self, source, source_name: Optional[str] = None) -> Report:
        if self._claimed:
            raise AnalyzerStateError("StreamAnalyzer is single-use, create a new one for each source")
        self._claimed = True
        name = source_name if source_name is not None else source_name_of(source)
        logger.debug(f"analyzing {name} (chunk_size={self.chunk_size}, block_size={self.block_size})")

        with SourceReaderFactory(source) as handle:
            self._drain(handle, name)

        self.state = AnalyzerState.FINALIZING
        self.report = self._finalize(name)
        self.state = AnalyzerState.DONE
        logger.debug(f"{name}: {self.report.total_bytes} bytes, entropy {self.report.entropy:.5f}")
        return self.report

    def _next_read_size(self) -> int:
        if self.chunks is None:
            return self.block_size
        return min(self.block_size, self.chunks.remaining())

    def _drain(self, handle, name: str) -> None:
        while True:
            try:
                block = handle.read(self._next_read_size())
            except OSError as e:
                raise SourceUnavailableError(name, e.strerror or str(e)) from e
            if isinstance(block, str):
                raise TypeError(f"{name} must be opened in binary mode")
            if not block:
                break
            self.table.update(block)
            if self.chunks is not None:
                self.chunks.ingest(block)

    def _finalize(self, name: str) -> Report:
        chunk_entropies = ()
        if self.chunks is not None:
            self.chunks.flush()
            chunk_entropies = tuple(self.chunks.entropies)
        return Report(
            source_name=name,
            total_bytes=self.table.total,
            entropy=self.table.entropy(),
            frequency_table=self.table.freeze(),
            chunk_entropies=chunk_entropies,
            chunk_size=self.chunk_size,
        )

def analyze(source, chunk_size: Optional[int] = None, source_name: Optional[str] = None) -> Report:
    return StreamAnalyzer(chunk_size=chunk_size).analyze(source, source_name=source_name)

def analyze_path(path, chunk_size: Optional[int] = None) -> Report:
    if path == STDIN_NAME:
        return analyze_stdin(chunk_size)
    return analyze(path, chunk_size=chunk_size)

def analyze_stdin(chunk_size: Optional[int] = None) -> Report:
    return analyze(STDIN_NAME, chunk_size=chunk_size, source_name=STDIN_NAME)

def _analyze_or_error(path, chunk_size=None) -> Union[Report, SourceUnavailableError]:
    try:
        return analyze_path(path, chunk_size=chunk_size)
    except SourceUnavailableError as e:
        return e

def analyze_paths(paths: Iterable, chunk_size: Optional[int] = None, num_processes: Optional[int] = None) -> List[Union[Report, SourceUnavailableError]]:
    """
    Analyze independent inputs, one analyzer each. Results keep input order; an input
    that cannot be read yields its SourceUnavailableError instead of a Report.
    Standard input is always read in the calling process.
    """
    paths = list(paths)
    validate_chunk_size(chunk_size)
    if num_processes is None:
        num_processes = min(multiprocessing.cpu_count(), settings.max_processes or 1)
    worker = partial(_analyze_or_error, chunk_size=chunk_size)

    files = [p for p in paths if p != STDIN_NAME]
    if num_processes <= 1 or len(files) <= 1:
        return [worker(p) for p in paths]

    logger.info(f"analyzing {len(files)} inputs with {num_processes} processes")
    with multiprocessing.Pool(processes=min(num_processes, len(files))) as pool:
        file_results = iter(pool.map(worker, files))
    return [worker(p) if p == STDIN_NAME else next(file_results) for p in paths]
