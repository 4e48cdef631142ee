from pathlib import Path
from typing import List, Sequence

import structlog

from trendsage.core.interfaces import Aggregator, Reader
from trendsage.core.visitor import DefaultResultsVisitor
from trendsage.models.launch import LaunchResults

logger = structlog.get_logger(__name__)


class ReportGenerator:
    """Runs every reader over each results directory, then every aggregator over all launches."""

    def __init__(self, readers: Sequence[Reader], aggregators: Sequence[Aggregator]) -> None:
        self.readers = list(readers)
        self.aggregators = list(aggregators)

    def read_launches(self, results_directories: Sequence[Path]) -> List[LaunchResults]:
        launches: List[LaunchResults] = []
        for directory in results_directories:
            visitor = DefaultResultsVisitor()
            for reader in self.readers:
                reader.read_results(visitor, Path(directory))
            launch = visitor.build()
            logger.info("launch_read", directory=str(directory), results=len(launch.results))
            launches.append(launch)
        return launches

    def generate(self, results_directories: Sequence[Path], output_directory: Path) -> List[LaunchResults]:
        launches = self.read_launches(results_directories)
        for aggregator in self.aggregators:
            aggregator.aggregate(launches, Path(output_directory))
        return launches
