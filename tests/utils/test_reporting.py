import json
from pathlib import Path
import pytest
from cachesim.config import SimConfig
from cachesim.runtime.stats import CacheStats
from cachesim.utils.reporting import generate_report_json, generate_report, summary_line


@pytest.fixture
def sample_stats():
    """Provides counters for a two-set cache."""
    stats = CacheStats.for_sets(2)
    stats.record_miss(0, evicted=False)
    stats.record_hit(0)
    stats.record_hit(0)
    stats.record_miss(1, evicted=False)
    stats.record_miss(1, evicted=True)
    return stats


@pytest.fixture
def sample_config():
    return SimConfig(num_sets=2, lines_per_set=1, line_bytes=16, policy="LRU", trace_file="t.trace")


def test_summary_line(sample_stats):
    assert summary_line(sample_stats) == "hits:2 misses:3 evictions:1"


def test_summary_line_empty_run():
    assert summary_line(CacheStats()) == "hits:0 misses:0 evictions:0"


def test_generate_report_json(sample_stats, sample_config):
    report = generate_report_json(sample_stats, sample_config)

    assert report["hits"] == 2
    assert report["misses"] == 3
    assert report["evictions"] == 1
    assert report["accesses"] == 5
    assert report["hit_rate"] == f"{(2 / 5):.2%}"
    assert report["per_set"][1] == {"set": 1, "hits": 0, "misses": 2, "evictions": 1}
    assert report["config"]["policy"] == "LRU"


def test_generate_report_json_no_accesses(sample_config):
    report = generate_report_json(CacheStats.for_sets(2), sample_config)
    assert report["accesses"] == 0
    assert report["hit_rate"] == "0.00%"


def test_generate_report_full(sample_stats, sample_config, tmp_path: Path, capsys):
    """Tests the main generate_report function that writes all artifacts."""
    sample_config.report_dir = str(tmp_path)
    sample_config.verbose = True

    generate_report(sample_stats, sample_config)

    data = json.loads((tmp_path / "report.json").read_text())
    assert data["per_set"][0]["hits"] == 2

    html_file = tmp_path / "report.html"
    assert html_file.exists()
    assert "Accesses per Set" in html_file.read_text(encoding='utf-8')

    captured = capsys.readouterr()
    assert "Cache Accesses per Set" in captured.out
    assert "Reports generated in" in captured.out
