import json
from pathlib import Path
from typing import Iterable, Optional

import structlog
from pydantic import ValidationError

from trendsage.core.errors import ParseError
from trendsage.core.interfaces import Reader, ResultsVisitor
from trendsage.models.launch import ExecutorInfo, LaunchResults

logger = structlog.get_logger(__name__)

EXECUTORS_BLOCK_NAME = "executors"
EXECUTOR_JSON = "executor.json"


def resolve_latest_executor(launches: Iterable[LaunchResults]) -> ExecutorInfo:
    """
    Picks the executor with the greatest build order across launches.

    Launches without executor info, or with a null build order, are ignored.
    On equal build orders the earliest launch wins. Returns an empty
    ExecutorInfo when no launch has a build order.
    """
    latest: Optional[ExecutorInfo] = None
    for launch in launches:
        executor = launch.get_extra(EXECUTORS_BLOCK_NAME, ExecutorInfo)
        if executor is None or executor.build_order is None:
            continue
        if latest is None or executor.build_order > latest.build_order:
            latest = executor
    return latest if latest is not None else ExecutorInfo()


class ExecutorPlugin(Reader):
    """Publishes the executor.json of a results directory as the "executors" extra."""

    def read_results(self, visitor: ResultsVisitor, results_directory: Path) -> None:
        path = Path(results_directory) / EXECUTOR_JSON
        if not path.is_file():
            return
        try:
            executor = ExecutorInfo.model_validate(json.loads(path.read_bytes()))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise ParseError(f"Invalid executor info: {e}", path) from e
        logger.debug("executor_loaded", path=str(path), build_order=executor.build_order)
        visitor.visit_extra(EXECUTORS_BLOCK_NAME, executor)
