from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from trendsage.core.errors import ExtraShapeError


class Status(str, Enum):
    FAILED = "failed"
    BROKEN = "broken"
    PASSED = "passed"
    SKIPPED = "skipped"
    UNKNOWN = "unknown"


class TestResult(BaseModel):
    """A single test outcome as written by a test framework adapter."""
    __test__ = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    uuid: Optional[str] = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    status: Status = Status.UNKNOWN


class ExecutorInfo(BaseModel):
    """Metadata identifying the CI build that produced a launch."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    build_order: Optional[int] = None
    build_name: Optional[str] = None
    build_url: Optional[str] = None
    report_name: Optional[str] = None
    report_url: Optional[str] = None


class LaunchResults(BaseModel):
    """
    One test-execution batch plus the extras published while reading it.

    Extras are stored by block name and retrieved through `get_extra`, which
    validates the stored value against the shape the caller expects.
    """
    model_config = ConfigDict(frozen=True)

    results: List[TestResult] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(default_factory=dict)

    def get_extra(self, key: str, shape: Any) -> Optional[Any]:
        if key not in self.extras:
            return None
        try:
            return _adapter_for(shape).validate_python(self.extras[key])
        except ValidationError as e:
            raise ExtraShapeError(f"Extra '{key}' does not match the expected shape: {e}") from e


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)
