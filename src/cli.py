import sys
import argparse
import logging
from typing import Optional
from config import settings
from src.entropy.analyzer import analyze_paths
from src.presentation.export import export_report, summary_frame
from src.presentation.plot import plot_byte_frequency, plot_chunk_entropy
from src.presentation.pretty import pretty_ascii_table, pretty_chunk_bars, pretty_line, pretty_statistics
from src.utils.exceptions import SourceUnavailableError
from src.utils.log import init_logging, get_logger

logger = get_logger(__name__)

def build_parser():
    parser = argparse.ArgumentParser(
        prog="byte-entropy",
        description="Shannon entropy of files or standard input, in bits per byte",
    )
    parser.add_argument('files', nargs='*', help="Files to analyze, '-' reads standard input")
    parser.add_argument('-b', '--byte-frequency', action='store_true', help="Print the byte frequency histogram")
    parser.add_argument('-c', '--chunks', action='store_true', help="Print the entropy of each chunk")
    parser.add_argument('--chunk-size', type=int, default=None,
                        help=f"Chunk size in bytes, implies --chunks (default: {settings.chunk_size})")
    parser.add_argument('-s', '--stats', action='store_true', help="Print mean, std dev, min/max byte and random walk")
    parser.add_argument('--plot', metavar='DIR', help="Save frequency and chunk entropy figures to DIR")
    parser.add_argument('--csv', metavar='DIR', help="Save frequency tables and chunk entropies as CSV to DIR")
    parser.add_argument('-j', '--jobs', type=int, default=1, help="Number of processes for multiple files (0: auto)")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log progress to stderr")
    return parser

def chunk_size_from_args(args) -> Optional[int]:
    if args.chunk_size is not None:
        return args.chunk_size
    if args.chunks or args.plot:
        return settings.chunk_size
    return None

def print_report(report, args) -> None:
    print(pretty_line(report))
    if args.stats:
        print(pretty_statistics(report))
    if args.byte_frequency:
        print(pretty_ascii_table(report.frequency_table))
    if (args.chunks or args.chunk_size is not None) and report.chunk_entropies:
        print(pretty_chunk_bars(report.chunk_entropies, report.chunk_size))
    if args.plot:
        plot_byte_frequency(report, args.plot)
        plot_chunk_entropy(report, args.plot)
    if args.csv:
        export_report(report, args.csv)

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else settings.log_level
    init_logging(settings.log_file, settings.save_log, level=level)

    if not args.files:
        parser.print_help()
        return 1
    if args.chunk_size is not None and args.chunk_size <= 0:
        parser.error("--chunk-size must be a positive integer")

    num_processes = None if args.jobs == 0 else args.jobs
    results = analyze_paths(args.files, chunk_size=chunk_size_from_args(args), num_processes=num_processes)

    failed = False
    reports = []
    for result in results:
        if isinstance(result, SourceUnavailableError):
            logger.error(f"couldn't open {result.source_name}: {result.reason}")
            failed = True
            continue
        print_report(result, args)
        reports.append(result)

    if args.csv and len(reports) > 1:
        summary_frame(reports).to_csv(f"{args.csv}/summary.csv", index=False)

    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
