from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from config import settings
from src.entropy.stats import MAX_ENTROPY
from src.presentation.export import output_stem

def _figure_path(output_directory, source_name: str, suffix: str) -> Path:
    output_directory = Path(output_directory)
    output_directory.mkdir(parents=True, exist_ok=True)
    return output_directory / f"{output_stem(source_name)}.{suffix}.png"

def plot_byte_frequency(report, output_directory) -> Path:
    total = max(report.total_bytes, 1)
    freq = report.frequency_table.astype(np.float64) / total

    fig = plt.figure(figsize=settings.plot.frequency_figsize, dpi=settings.plot.dpi)
    ax = fig.add_subplot(111)
    ax.bar(np.arange(len(freq)), freq, 1.0)
    ax.set_xlim([0, 255])
    ax.set_ylabel("Frequency")
    ax.set_xlabel("Byte")
    ax.set_title(f"Frequency of bytes 0 to 255\n{report.source_name} (entropy {report.entropy:.5f})")

    path = _figure_path(output_directory, report.source_name, "frequency")
    fig.savefig(path)
    plt.close(fig)
    return path

def plot_chunk_entropy(report, output_directory) -> Path:
    if report.chunk_size is None:
        raise ValueError(f"{report.source_name} was analyzed without chunking")
    entropies = np.asarray(report.chunk_entropies, dtype=np.float64)

    fig = plt.figure(figsize=settings.plot.chunk_figsize, dpi=settings.plot.dpi, layout="tight")
    ax = fig.add_subplot(111)
    ax.bar(np.arange(len(entropies)), entropies, 1.0)
    ax.set_xlim([0, max(len(entropies), 1)])
    ax.set_ylim([0, MAX_ENTROPY])
    ax.set_ylabel("Entropy")
    ax.set_xlabel(f"Chunk ({report.chunk_size:,d} bytes)")
    ax.set_title(f"Entropy per chunk\n{report.source_name}")

    path = _figure_path(output_directory, report.source_name, "chunks")
    fig.savefig(path)
    plt.close(fig)
    return path
