# src/use_cases/analyze_ticker_use_case.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import Mapping, Optional, Sequence

from src.domain.services.document_preparation import (
    DEFAULT_FORUM_POST_LIMIT,
    prepare_documents,
)
from src.domain.services.momentum_interpreter import (
    DEFAULT_OBV_LOOKBACK,
    interpret_momentum,
)
from src.domain.services.price_performance import compute_price_performance
from src.domain.services.sentiment_aggregator import SentimentAggregator
from src.domain.time.utc import ensure_utc
from src.entities.candle import Candle
from src.entities.ticker_analysis import TickerAnalysis
from src.interfaces.analysis_report_writer import AnalysisReportWriter
from src.interfaces.candle_repository import CandleRepository
from src.interfaces.technical_indicator_calculator import TechnicalIndicatorCalculatorPort
from src.interfaces.text_document_repository import TextDocumentRepository

logger = logging.getLogger(__name__)


class AnalyzeTickerUseCase:
    """
    Orquestra a análise de um ativo:
    - carrega candles e documentos de texto
    - calcula indicadores técnicos e sinais de momentum
    - pontua e agrega sentimento por fonte
    - (opcional) persiste o relatório consolidado

    Séries vazias ou curtas não são erro: o resultado traz campos
    vazios/None para que a camada de apresentação mostre "N/A".
    """

    def __init__(
        self,
        candle_repository: CandleRepository,
        document_repository: TextDocumentRepository,
        indicator_calculator: TechnicalIndicatorCalculatorPort,
        sentiment_aggregator: SentimentAggregator,
        report_writer: AnalysisReportWriter | None = None,
        company_aliases: Mapping[str, Sequence[str]] | None = None,
        forum_post_limit: int = DEFAULT_FORUM_POST_LIMIT,
        obv_lookback: int = DEFAULT_OBV_LOOKBACK,
    ) -> None:
        self.candle_repository = candle_repository
        self.document_repository = document_repository
        self.indicator_calculator = indicator_calculator
        self.sentiment_aggregator = sentiment_aggregator
        self.report_writer = report_writer
        self.company_aliases = dict(company_aliases or {})
        self.forum_post_limit = forum_post_limit
        self.obv_lookback = obv_lookback

    def execute(
        self,
        asset_id: str,
        start_date: Optional[datetime] = None,
    ) -> TickerAnalysis:
        ticker = asset_id.strip().upper()

        candles = self._ordered_candles(self.candle_repository.load_candles(ticker))

        if start_date is not None:
            start_utc = ensure_utc(start_date)
            candles = [c for c in candles if ensure_utc(c.timestamp) >= start_utc]

        if not candles:
            logger.warning(
                "No candles available, indicators will be empty",
                extra={"asset_id": ticker},
            )

        indicators = self.indicator_calculator.calculate(
            asset_id=ticker,
            candles=candles,
        )

        documents = prepare_documents(
            self.document_repository.load_documents(ticker),
            ticker=ticker,
            company_aliases=self.company_aliases,
            forum_post_limit=self.forum_post_limit,
        )
        sentiment = self.sentiment_aggregator.aggregate(documents)

        analysis = TickerAnalysis(
            ticker=ticker,
            candle_count=len(candles),
            indicators=indicators,
            price_performance=compute_price_performance(candles),
            momentum=interpret_momentum(indicators, self.obv_lookback),
            sentiment=sentiment,
        )

        logger.info(
            "Ticker analysis completed",
            extra={
                "asset_id": ticker,
                "candles": len(candles),
                "documents": sentiment.verdict.total_documents,
                "verdict": sentiment.verdict.label.value,
            },
        )

        if self.report_writer is not None:
            self.report_writer.write(analysis)

        return analysis

    @staticmethod
    def _ordered_candles(candles: Sequence[Candle]) -> list[Candle]:
        # Garantia temporal explícita
        ordered = sorted(candles, key=lambda c: ensure_utc(c.timestamp))

        for previous, current in zip(ordered, ordered[1:]):
            if ensure_utc(previous.timestamp) == ensure_utc(current.timestamp):
                raise ValueError(
                    f"Duplicate candle timestamp: {current.timestamp.isoformat()}"
                )

        return ordered
