from trendsage.history.statistics import compute_statistic
from trendsage.models.launch import Status


def test_empty_results_give_zero_statistic():
    statistic = compute_statistic([])
    assert statistic.total == 0
    assert (statistic.failed, statistic.broken, statistic.skipped, statistic.passed, statistic.unknown) == (0, 0, 0, 0, 0)


def test_counts_partition_results(make_results):
    results = make_results(
        Status.PASSED, Status.FAILED, Status.FAILED, Status.BROKEN,
        Status.SKIPPED, Status.UNKNOWN, Status.PASSED,
    )
    statistic = compute_statistic(results)

    assert statistic.total == len(results)
    assert statistic.passed == 2
    assert statistic.failed == 2
    assert statistic.broken == 1
    assert statistic.skipped == 1
    assert statistic.unknown == 1
    assert statistic.total == sum(
        [statistic.passed, statistic.failed, statistic.broken, statistic.skipped, statistic.unknown]
    )


def test_accepts_generators(make_results):
    results = make_results(Status.PASSED, Status.FAILED)
    statistic = compute_statistic(r for r in results)
    assert statistic.total == 2
