from pathlib import Path
from typing import List, Optional

import structlog

from trendsage.core.interfaces import Aggregator, Reader, ResultsVisitor
from trendsage.history.codec import TrendCodec
from trendsage.history.executor import resolve_latest_executor
from trendsage.history.statistics import compute_statistic
from trendsage.history.store import read_history_trend, write_history_trend
from trendsage.history.trend_models import HistoryTrendItem
from trendsage.models.launch import LaunchResults

logger = structlog.get_logger(__name__)

HISTORY_TREND_BLOCK_NAME = "history-trend"


class HistoryTrendPlugin(Reader, Aggregator):
    """
    Carries the build trend from one report to the next.

    Reading publishes the series found in a results directory as the
    "history-trend" extra. Aggregating prepends a point for the current
    launches to every series found and writes the result for the next run.
    """

    def __init__(self, codec: Optional[TrendCodec] = None, max_items: Optional[int] = None) -> None:
        self.codec = codec or TrendCodec()
        self.max_items = max_items

    def read_results(self, visitor: ResultsVisitor, results_directory: Path) -> None:
        items = read_history_trend(results_directory, self.codec)
        if items is not None:
            visitor.visit_extra(HISTORY_TREND_BLOCK_NAME, items)

    def aggregate(self, launches: List[LaunchResults], output_directory: Path) -> None:
        data = self.get_data(launches)
        if self.max_items is not None and len(data) > self.max_items:
            logger.info("history_trend_truncated", items=len(data), max_items=self.max_items)
            data = data[:self.max_items]
        write_history_trend(output_directory, data, self.codec)

    def get_data(self, launches: List[LaunchResults]) -> List[HistoryTrendItem]:
        statistic = compute_statistic(result for launch in launches for result in launch.results)
        executor = resolve_latest_executor(launches)

        current = HistoryTrendItem(
            build_order=executor.build_order,
            report_name=executor.report_name,
            report_url=executor.report_url,
            statistic=statistic,
        )

        data = [current]
        for launch in launches:
            history = launch.get_extra(HISTORY_TREND_BLOCK_NAME, List[HistoryTrendItem])
            if history:
                data.extend(history)
        return data
