import pytest
from src.entropy.analyzer import analyze_paths
from src.entropy.report import Report
from src.utils.exceptions import SourceUnavailableError
from tests.helpers import write_file

def test_inline_keeps_order_and_errors(tmp_path, engineered_file, uniform_file):
    missing = tmp_path / "missing.bin"
    results = analyze_paths([engineered_file, missing, uniform_file], num_processes=1)
    assert isinstance(results[0], Report)
    assert isinstance(results[1], SourceUnavailableError)
    assert results[1].source_name == str(missing)
    assert results[2].entropy == pytest.approx(8.0)

def test_invalid_chunk_size_rejected_up_front(engineered_file):
    with pytest.raises(ValueError):
        analyze_paths([engineered_file], chunk_size=-5)

def test_stdin_is_read_in_process(fake_stdin, engineered_file):
    fake_stdin(b"abc")
    results = analyze_paths(["-", engineered_file], num_processes=1)
    assert results[0].source_name == "-"
    assert results[0].total_bytes == 3

@pytest.mark.integration
def test_process_pool(tmp_path):
    paths = [write_file(tmp_path, f"f{i}.bin", bytes([i]) * (i + 1) + bytes(range(i))) for i in range(6)]
    paths.insert(3, tmp_path / "missing.bin")
    results = analyze_paths(paths, chunk_size=2, num_processes=3)
    assert len(results) == 7
    assert isinstance(results[3], SourceUnavailableError)
    reports = [r for r in results if isinstance(r, Report)]
    assert [r.source_name for r in reports] == [str(p) for i, p in enumerate(paths) if i != 3]
    assert [r.total_bytes for r in reports] == [2 * i + 1 for i in range(6)]
    assert not reports[0].frequency_table.flags.writeable
