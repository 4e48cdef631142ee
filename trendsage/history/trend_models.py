from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Statistic(BaseModel):
    """Per-status outcome counts plus their total."""
    model_config = ConfigDict(frozen=True)

    failed: int = 0
    broken: int = 0
    skipped: int = 0
    passed: int = 0
    unknown: int = 0
    total: int = 0


class HistoryTrendItem(BaseModel):
    """A single point in the persisted trend series."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    build_order: Optional[int] = None
    report_name: Optional[str] = None
    report_url: Optional[str] = None
    statistic: Statistic
