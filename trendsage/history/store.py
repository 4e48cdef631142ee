from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from trendsage.history.codec import TrendCodec
from trendsage.history.trend_models import HistoryTrendItem, Statistic

logger = structlog.get_logger(__name__)

HISTORY_DIR = "history"
HISTORY_TREND_JSON = "history-trend.json"


def history_trend_path(directory: Path) -> Path:
    return Path(directory) / HISTORY_DIR / HISTORY_TREND_JSON


def read_history_trend(results_directory: Path, codec: TrendCodec) -> Optional[List[HistoryTrendItem]]:
    """
    Loads the trend series a previous run left in the results directory.

    Returns None when there is no trend file. Raises ParseError when the file
    matches neither the current nor the legacy layout.
    """
    path = history_trend_path(results_directory)
    if not path.is_file():
        logger.debug("history_trend_not_found", path=str(path))
        return None

    items = codec.decode_items(path.read_bytes(), path)
    logger.info("history_trend_loaded", path=str(path), items=len(items))
    return items


def write_history_trend(output_directory: Path, items: Sequence[HistoryTrendItem], codec: TrendCodec) -> Path:
    """
    Persists the trend series, overwriting any existing file.

    An empty series is written as one all-zero point so the next run always
    has a point to continue from.
    """
    if not items:
        items = [HistoryTrendItem(statistic=Statistic())]

    payload = codec.encode_items(items)
    path = history_trend_path(output_directory)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(payload)

    logger.info("history_trend_written", path=str(path), items=len(items))
    return path
