import argparse
import logging
import sys

from dotenv import load_dotenv

from src.adapters.json_analysis_report_writer import JsonAnalysisReportWriter
from src.adapters.parquet_candle_repository import ParquetCandleRepository
from src.adapters.parquet_text_document_repository import ParquetTextDocumentRepository
from src.adapters.technical_indicator_calculator import TechnicalIndicatorCalculator
from src.domain.services.sentiment_aggregator import SentimentAggregator
from src.domain.time.utc import parse_iso_utc, start_of_year
from src.use_cases.analyze_ticker_use_case import AnalyzeTickerUseCase
from src.utils.config_loader import load_analysis_config
from src.utils.logging_config import setup_logging
from src.utils.path_resolver import load_data_paths

logger = logging.getLogger(__name__)
load_dotenv()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute technical indicators and lexicon sentiment for an asset"
    )

    parser.add_argument(
        "--asset",
        type=str,
        required=True,
        help="Asset identifier (e.g. AAPL)",
    )

    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="Only use candles on/after this ISO date (e.g. 2025-01-01 for YTD)",
    )

    parser.add_argument(
        "--ytd",
        action="store_true",
        help="Shortcut for --start at January 1st of the current year",
    )

    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Skip the run if a report already exists",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    setup_logging(logging.INFO)
    args = parse_args(argv)

    asset_id = args.asset.strip().upper()
    try:
        start_date = parse_iso_utc(args.start) if args.start else None
    except ValueError as exc:
        logger.error("Invalid --start: %s", exc)
        return 1
    if start_date is None and args.ytd:
        start_date = start_of_year()

    logger.info(
        "Starting ticker analysis",
        extra={
            "asset": asset_id,
            "start": start_date.date().isoformat() if start_date else None,
        },
    )

    # ---------- Paths / Config ----------
    paths = load_data_paths()
    config = load_analysis_config()

    # ---------- Adapters ----------
    try:
        candle_repository = ParquetCandleRepository(output_dir=paths["raw_candles"])
    except (FileNotFoundError, NotADirectoryError) as exc:
        logger.error("Candle storage unavailable: %s", exc)
        return 1

    document_repository = ParquetTextDocumentRepository(
        output_dir=paths["raw_documents"]
    )
    report_writer = JsonAnalysisReportWriter(
        output_dir=paths["reports"],
        overwrite=not args.no_overwrite,
    )

    # ---------- Use Case ----------
    use_case = AnalyzeTickerUseCase(
        candle_repository=candle_repository,
        document_repository=document_repository,
        indicator_calculator=TechnicalIndicatorCalculator(),
        sentiment_aggregator=SentimentAggregator(),
        report_writer=report_writer,
        company_aliases=config.company_aliases,
        forum_post_limit=config.forum_post_limit,
        obv_lookback=config.obv_lookback,
    )

    # ---------- Execute ----------
    try:
        analysis = use_case.execute(asset_id, start_date=start_date)
    except FileNotFoundError as exc:
        logger.error("Missing input data: %s", exc)
        return 1
    except FileExistsError as exc:
        logger.info("Analysis skipped (report already exists): %s", exc)
        return 0
    except ValueError as exc:
        logger.error("Invalid input data: %s", exc)
        return 1

    trend = analysis.indicators.trend_annotation
    logger.info(
        "Analysis finished",
        extra={
            "asset": asset_id,
            "trend": trend.label.value if trend else "n/a",
            "sentiment": analysis.sentiment.verdict.label.value,
            "sentiment_score": round(analysis.sentiment.verdict.score, 4),
        },
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
