from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

from trendsage.models.launch import LaunchResults, TestResult


class ResultsVisitor(ABC):
    """
    Receives everything a reader finds in a results directory.
    """
    @abstractmethod
    def visit_test_result(self, result: TestResult) -> None:
        pass

    @abstractmethod
    def visit_extra(self, name: str, value: Any) -> None:
        """
        Publishes a named side-channel value (e.g. "history-trend") for the launch.
        """
        pass


class Reader(ABC):
    """
    Base interface for a component that reads one results directory.
    """
    @abstractmethod
    def read_results(self, visitor: ResultsVisitor, results_directory: Path) -> None:
        pass


class Aggregator(ABC):
    """
    Base interface for a component that combines all launches into report output.
    """
    @abstractmethod
    def aggregate(self, launches: List[LaunchResults], output_directory: Path) -> None:
        pass
