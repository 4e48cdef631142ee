import json
from pathlib import Path

import pytest

from trendsage.core.errors import ParseError
from trendsage.history.executor import ExecutorPlugin
from trendsage.history.store import HISTORY_TREND_JSON
from trendsage.history.trend_builder import HistoryTrendPlugin
from trendsage.report.generator import ReportGenerator
from trendsage.results.reader import TestResultReader


def make_results_dir(root: Path, name: str, statuses, build_order=None) -> Path:
    directory = root / name
    directory.mkdir()
    for i, status in enumerate(statuses):
        (directory / f"{i}-result.json").write_text(json.dumps({"uuid": str(i), "status": status}))
    if build_order is not None:
        (directory / "executor.json").write_text(json.dumps({"buildOrder": build_order, "reportName": name}))
    return directory


def make_generator() -> ReportGenerator:
    plugin = HistoryTrendPlugin()
    return ReportGenerator(readers=[TestResultReader(), ExecutorPlugin(), plugin], aggregators=[plugin])


def test_generate_writes_trend_for_all_launches(tmp_path: Path, unpack_fixture):
    first = make_results_dir(tmp_path, "first", ["passed", "failed"], build_order=1)
    second = make_results_dir(tmp_path, "second", ["failed"], build_order=7)
    unpack_fixture("history/history-trend.json", second / "history" / HISTORY_TREND_JSON)
    output = tmp_path / "report"

    launches = make_generator().generate([first, second], output)

    assert [len(launch.results) for launch in launches] == [2, 1]
    data = json.loads((output / "history" / HISTORY_TREND_JSON).read_text())
    assert [d["statistic"]["total"] for d in data] == [3, 20, 12, 12, 1]
    assert data[0]["buildOrder"] == 7
    assert data[0]["reportName"] == "second"
    assert data[0]["statistic"]["failed"] == 2


def test_generate_propagates_parse_errors(tmp_path: Path):
    results = make_results_dir(tmp_path, "results", ["passed"])
    (results / "history").mkdir()
    (results / "history" / HISTORY_TREND_JSON).write_text("not json")
    output = tmp_path / "report"

    with pytest.raises(ParseError):
        make_generator().generate([results], output)
    assert not (output / "history" / HISTORY_TREND_JSON).exists()
