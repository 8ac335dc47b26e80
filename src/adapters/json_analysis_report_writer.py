# src/adapters/json_analysis_report_writer.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from src.entities.indicator_set import IndicatorSeries
from src.entities.sentiment_summary import SentimentReport
from src.entities.ticker_analysis import TickerAnalysis
from src.interfaces.analysis_report_writer import AnalysisReportWriter

logger = logging.getLogger(__name__)


def _series_payload(series: IndicatorSeries) -> dict[str, Any]:
    return {"value": series.value, "series": list(series.series)}


def _sentiment_payload(report: SentimentReport) -> dict[str, Any]:
    summaries = {}
    for source, summary in report.summaries.items():
        summaries[source.value] = {
            "count": summary.count,
            "bullishCount": summary.bullish_count,
            "bearishCount": summary.bearish_count,
            "neutralCount": summary.neutral_count,
            "averageScore": summary.average_score,
            "bucketDistribution": {
                bucket.value: count
                for bucket, count in summary.bucket_distribution.items()
            },
        }

    return {
        "sources": summaries,
        "documents": [
            {
                "sourceId": item.document.source_id.value,
                "title": item.document.title,
                "text": item.document.text,
                "score": item.score,
                "label": item.label.value,
                "bucket": item.bucket.value,
            }
            for item in report.documents
        ],
        "combined": {
            "score": report.verdict.score,
            "label": report.verdict.label.value,
            "totalDocuments": report.verdict.total_documents,
        },
    }


def analysis_to_dict(analysis: TickerAnalysis) -> dict[str, Any]:
    """
    Presentation payload: camelCase keys, enums as their string values.
    """
    indicators = analysis.indicators
    annotation = indicators.trend_annotation
    momentum = analysis.momentum

    return {
        "ticker": analysis.ticker,
        "candleCount": analysis.candle_count,
        "pricePerformance": {
            "firstClose": analysis.price_performance.first_close,
            "latestClose": analysis.price_performance.latest_close,
            "periodHigh": analysis.price_performance.period_high,
            "periodLow": analysis.price_performance.period_low,
            "growthPct": analysis.price_performance.growth_pct,
        },
        "technicalAnalysis": {
            "ema": {
                str(int(period)): _series_payload(series)
                for period, series in indicators.emas.items()
            },
            "macd": _series_payload(indicators.macd),
            "macdSignal": _series_payload(indicators.macd_signal),
            "obv": _series_payload(indicators.obv),
            "trendAnnotation": (
                {
                    "label": annotation.label.value,
                    "polarity": annotation.polarity,
                    "message": annotation.message,
                }
                if annotation
                else None
            ),
        },
        "momentum": {
            "macdCrossover": momentum.macd_crossover.value
            if momentum.macd_crossover
            else None,
            "macdDifference": momentum.macd_difference,
            "obvTrend": momentum.obv_trend.value if momentum.obv_trend else None,
            "obvPctChange": momentum.obv_pct_change,
            "obvLookback": momentum.obv_lookback,
        },
        "sentiment": _sentiment_payload(analysis.sentiment),
    }


class JsonAnalysisReportWriter(AnalysisReportWriter):
    """
    Writes one JSON report per asset:
      reports/AAPL/analysis_AAPL.json
    """

    def __init__(self, output_dir: str | Path, overwrite: bool = True) -> None:
        self.output_dir = Path(output_dir)
        self.overwrite = overwrite

        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise NotADirectoryError(
                f"Report output_dir is not a directory: {self.output_dir.resolve()}"
            )

    def _filepath(self, ticker: str) -> Path:
        symbol = ticker.split(".")[0].upper()
        return self.output_dir / symbol / f"analysis_{symbol}.json"

    def write(self, analysis: TickerAnalysis) -> Path:
        filepath = self._filepath(analysis.ticker)

        if filepath.exists() and not self.overwrite:
            raise FileExistsError(
                f"Analysis report already exists: {filepath.resolve()}"
            )

        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(analysis_to_dict(analysis), f, indent=2, ensure_ascii=False)

        logger.info(
            "Analysis report written",
            extra={"ticker": analysis.ticker, "path": str(filepath.resolve())},
        )

        return filepath
