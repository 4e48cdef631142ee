from typing import Any, Dict, List

import structlog

from trendsage.core.interfaces import ResultsVisitor
from trendsage.models.launch import LaunchResults, TestResult

logger = structlog.get_logger(__name__)


class DefaultResultsVisitor(ResultsVisitor):
    """Collects the results and extras of one results directory into a launch."""

    def __init__(self) -> None:
        self._results: List[TestResult] = []
        self._extras: Dict[str, Any] = {}

    def visit_test_result(self, result: TestResult) -> None:
        self._results.append(result)

    def visit_extra(self, name: str, value: Any) -> None:
        if name in self._extras:
            logger.warning("extra_overwritten", name=name)
        self._extras[name] = value

    def build(self) -> LaunchResults:
        return LaunchResults(results=list(self._results), extras=dict(self._extras))
