import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from trendsage.core.interfaces import Reader, ResultsVisitor
from trendsage.models.launch import TestResult

logger = structlog.get_logger(__name__)

RESULT_FILE_GLOB = "*-result.json"


class TestResultReader(Reader):
    """Visits every *-result.json file of a results directory as a TestResult."""
    __test__ = False

    def read_results(self, visitor: ResultsVisitor, results_directory: Path) -> None:
        count = 0
        for path in sorted(Path(results_directory).glob(RESULT_FILE_GLOB)):
            try:
                result = TestResult.model_validate(json.loads(path.read_bytes()))
            except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
                logger.warning("test_result_skipped", path=str(path), error=str(e))
                continue
            visitor.visit_test_result(result)
            count += 1
        logger.debug("test_results_loaded", directory=str(results_directory), count=count)
