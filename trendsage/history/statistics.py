from collections import Counter
from typing import Iterable

from trendsage.history.trend_models import Statistic
from trendsage.models.launch import Status, TestResult


def compute_statistic(results: Iterable[TestResult]) -> Statistic:
    """Counts test results by status."""
    counts = Counter(result.status for result in results)
    return Statistic(
        failed=counts[Status.FAILED],
        broken=counts[Status.BROKEN],
        skipped=counts[Status.SKIPPED],
        passed=counts[Status.PASSED],
        unknown=counts[Status.UNKNOWN],
        total=sum(counts.values()),
    )
