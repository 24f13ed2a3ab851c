"""Quality checker interface."""

from abc import ABC, abstractmethod

from .report import QualityReport


class QualityChecker(ABC):
    """Assesses the data currently held by a sink.

    ``generate_quality_report`` never raises: a failed assessment comes back
    as a report whose status starts with ``ERROR:``.
    """

    @abstractmethod
    def generate_quality_report(self) -> QualityReport:
        """Build a report for the sink's current contents."""

    @abstractmethod
    def check_connection(self) -> bool:
        """Return True when the sink can be read."""
