from typing import Sequence
import numpy as np
from config import settings
from src.entropy.stats import MAX_ENTROPY

SIZE_UNITS = "BKMGTPEZY"
FREQ_GLYPHS = " ▁▂▃▄▅▆▇█"

# label printed before the cell at each offset
_ROW_LABELS = {0x00: "   00 ", 0x20: "   20 ", 0x40: "\n   40 ", 0x60: "   60 ",
               0x80: "\n   80 ", 0xA0: "   A0 ", 0xC0: "\n   C0 ", 0xE0: "   E0 "}

def pretty_size(size: int) -> str:
    unit = 0
    value = float(size)
    while value >= 1000 and unit < len(SIZE_UNITS) - 1:
        value /= 1000
        unit += 1
    return f"{value:>6.1f} {SIZE_UNITS[unit]} "

def pretty_ascii_table(counts: Sequence[int]) -> str:
    """
    Draw the 256 byte counts as glyph heights scaled to the largest count.
    Two 32-cell groups per line, four lines, each group prefixed by its hex offset.
    """
    counts = np.asarray(counts, dtype=np.float64)
    peak = counts.max() if counts.size else 0.0
    levels = len(FREQ_GLYPHS)
    cells = []
    for i, count in enumerate(counts):
        if i in _ROW_LABELS:
            cells.append(_ROW_LABELS[i])
        n = int(count / peak * levels) if peak > 0 else 0
        cells.append(FREQ_GLYPHS[min(n, levels - 1)])
    return "".join(cells)

def pretty_chunk_bars(entropies: Sequence[float], chunk_size: int, width: int = None) -> str:
    width = width if width is not None else settings.bar_width
    lines = []
    for i, h in enumerate(entropies):
        bar = "#" * int(round(h / MAX_ENTROPY * width))
        lines.append(f"   {i * chunk_size:#010x}  {h:.5f}  {bar}")
    return "\n".join(lines)

def pretty_statistics(report) -> str:
    byte_min, count_min = report.byte_min()
    byte_max, count_max = report.byte_max()
    return "\n".join([
        f"   mean        : {report.mean():.3f}",
        f"   std dev     : {report.std_dev():.3f}",
        f"   min byte    : {byte_min:#04x} ({count_min} times)",
        f"   max byte    : {byte_max:#04x} ({count_max} times)",
        f"   random walk : {report.random_walk():+.5f}",
    ])

def pretty_line(report) -> str:
    return f"{report.entropy:.5f}  [{pretty_size(report.total_bytes)}]  {report.source_name}"
