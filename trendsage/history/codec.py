"""
JSON codec for the persisted history trend series.

Two layouts are accepted on decode. The current one stores each point as
``{"buildOrder", "reportName", "reportUrl", "statistic"}``. Older report
generators wrote the bare statistic object per point (``{"total": 20, ...}``),
or a point carrying only ``statistic``; those decode with a null build identity.
Encoding always uses the current layout.
"""
import json
from pathlib import Path
from typing import Any, List, Optional, Sequence

import structlog
from pydantic import TypeAdapter, ValidationError

from trendsage.core.errors import ParseError
from trendsage.history.trend_models import HistoryTrendItem, Statistic

logger = structlog.get_logger(__name__)


class TrendCodec:
    def __init__(self, indent: Optional[int] = None) -> None:
        self._indent = indent
        self._adapter = TypeAdapter(List[HistoryTrendItem])

    def decode_items(self, raw: bytes, path: Optional[Path] = None) -> List[HistoryTrendItem]:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Invalid JSON: {e}", path) from e

        if not isinstance(data, list):
            raise ParseError(f"Expected a JSON array, got {type(data).__name__}", path)

        try:
            return self._adapter.validate_python(data)
        except ValidationError:
            pass

        items = [self._decode_legacy(element, path) for element in data]
        logger.info("legacy_history_trend_decoded", path=str(path) if path else None, items=len(items))
        return items

    def encode_items(self, items: Sequence[HistoryTrendItem]) -> bytes:
        return self._adapter.dump_json(list(items), by_alias=True, indent=self._indent)

    @staticmethod
    def _decode_legacy(element: Any, path: Optional[Path]) -> HistoryTrendItem:
        if not isinstance(element, dict):
            raise ParseError(f"Expected a JSON object per trend point, got {type(element).__name__}", path)
        try:
            if "statistic" in element:
                return HistoryTrendItem.model_validate(element)
            if "total" in element:
                return HistoryTrendItem(statistic=Statistic.model_validate(element))
        except ValidationError as e:
            raise ParseError(f"Unrecognized trend point: {e}", path) from e
        raise ParseError(f"Unrecognized trend point with keys {sorted(element)}", path)
