import io
import os
import sys
from contextlib import contextmanager
from src.utils.exceptions import SourceUnavailableError

STDIN_NAME = "-"

@contextmanager
def _borrowed(handle):
    # caller owns the handle, leave it open
    yield handle

@contextmanager
def _opened(path, name):
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise SourceUnavailableError(name, e.strerror or str(e)) from e
    with handle:
        yield handle

def source_name_of(data) -> str:
    if isinstance(data, (str, os.PathLike)):
        return os.fsdecode(data)
    name = getattr(data, "name", None)
    if isinstance(name, (str, bytes)):
        return os.fsdecode(name)
    return "<memory>"

class SourceReaderFactory:
    """
    Returns a context manager yielding a binary handle for:
        - a path (str or PathLike); "-" means standard input
        - bytes, bytearray or memoryview
        - an already open binary handle, which is not closed on exit
    """

    def __new__(cls, data):
        if isinstance(data, str) and data == STDIN_NAME:
            return _borrowed(sys.stdin.buffer)
        elif isinstance(data, (str, os.PathLike)):
            return _opened(data, source_name_of(data))
        elif isinstance(data, (bytes, bytearray, memoryview)):
            return _borrowed(io.BytesIO(bytes(data)))
        elif hasattr(data, "read"):
            return _borrowed(data)
        else:
            raise ValueError(f"Invalid input type: {type(data).__name__}")
