from __future__ import annotations
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from ..config import SimConfig
from ..runtime.stats import CacheStats
from . import viz


def summary_line(stats: CacheStats) -> str:
    """The one-line result printed at the end of every run."""
    return f"hits:{stats.hits} misses:{stats.misses} evictions:{stats.evictions}"


def generate_report_json(stats: CacheStats, config: SimConfig) -> Dict[str, Any]:
    """Generates a JSON-compatible dictionary from the run counters."""
    return {
        "hits": stats.hits,
        "misses": stats.misses,
        "evictions": stats.evictions,
        "accesses": stats.accesses,
        "hit_rate": f"{stats.hit_rate:.2%}",
        "per_set": stats.per_set_rows(),
        "config": asdict(config),
    }


def generate_report(stats: CacheStats, config: SimConfig):
    """Writes report.json and report.html into config.report_dir."""
    report_data = generate_report_json(stats, config)
    output_dir = Path(config.report_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    with open(output_dir / "report.json", "w") as f:
        json.dump(report_data, f, indent=4)

    viz.export_set_chart(report_data["per_set"], str(output_dir / "report.html"))

    if config.verbose:
        print(viz.export_set_ascii(report_data["per_set"]))

    print(f"Reports generated in {output_dir.absolute()}")
