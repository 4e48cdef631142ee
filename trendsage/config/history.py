from typing import Optional
from pydantic import BaseModel, Field


class HistoryConfig(BaseModel):
    max_trend_items: Optional[int] = Field(None, gt=0, description="Keep only the most recent N trend points. Unbounded when unset.")
    indent: Optional[int] = Field(None, ge=0, description="Indentation of the written history-trend.json.")

    @classmethod
    def default(cls):
        return HistoryConfig()
