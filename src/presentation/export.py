from pathlib import Path
from typing import Iterable
import pandas as pd

def output_stem(source_name: str) -> str:
    return "stdin" if source_name == "-" else Path(source_name).name or "source"

def frequency_frame(report) -> pd.DataFrame:
    total = report.total_bytes
    counts = report.frequency_table.astype("uint64")
    df = pd.DataFrame({
        "byte": range(len(counts)),
        "count": counts,
        "frequency": counts / total if total else 0.0,
    })
    df.attrs["source_name"] = report.source_name
    return df

def chunk_frame(report) -> pd.DataFrame:
    chunk_size = report.chunk_size or 0
    df = pd.DataFrame({
        "chunk": range(len(report.chunk_entropies)),
        "offset": [i * chunk_size for i in range(len(report.chunk_entropies))],
        "entropy": list(report.chunk_entropies),
    })
    df.attrs["source_name"] = report.source_name
    return df

def summary_frame(reports: Iterable) -> pd.DataFrame:
    return pd.DataFrame([report.summary() for report in reports])

def export_report(report, output_directory) -> list[Path]:
    """Write the frequency table, and the chunk entropies when present, as CSV files."""
    output_directory = Path(output_directory)
    output_directory.mkdir(parents=True, exist_ok=True)
    stem = output_stem(report.source_name)

    written = []
    frequency_path = output_directory / f"{stem}.frequency.csv"
    frequency_frame(report).to_csv(frequency_path, index=False)
    written.append(frequency_path)
    if report.chunk_size is not None:
        chunk_path = output_directory / f"{stem}.chunks.csv"
        chunk_frame(report).to_csv(chunk_path, index=False)
        written.append(chunk_path)
    return written
