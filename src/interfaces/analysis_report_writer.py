# src/interfaces/analysis_report_writer.py

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from src.entities.ticker_analysis import TickerAnalysis


class AnalysisReportWriter(ABC):
    @abstractmethod
    def write(self, analysis: TickerAnalysis) -> Path:
        """Persist the analysis and return where it was written."""
        ...
