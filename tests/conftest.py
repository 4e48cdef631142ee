import random
import shutil
import uuid
from pathlib import Path

import pytest

from trendsage.history.trend_models import HistoryTrendItem, Statistic
from trendsage.models.launch import Status, TestResult

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def unpack_fixture():
    """Copies a file from tests/fixtures into place."""
    def _unpack(name: str, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(FIXTURES_DIR / name, target)
        return target
    return _unpack


@pytest.fixture
def random_history_items():
    def _make(count: int = 3):
        items = []
        for _ in range(count):
            passed, failed = random.randint(0, 50), random.randint(0, 10)
            items.append(HistoryTrendItem(
                build_order=random.randint(1, 1000),
                report_name=f"report-{uuid.uuid4().hex[:8]}",
                report_url=f"http://ci.example.com/{uuid.uuid4().hex[:8]}",
                statistic=Statistic(passed=passed, failed=failed, total=passed + failed),
            ))
        return items
    return _make


@pytest.fixture
def make_results():
    def _make(*statuses: Status):
        return [TestResult(uuid=uuid.uuid4().hex, name=f"test_{i}", status=s) for i, s in enumerate(statuses)]
    return _make
