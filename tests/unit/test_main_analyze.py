# tests/unit/test_main_analyze.py

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from src.adapters.parquet_candle_repository import ParquetCandleRepository
from src.entities.candle import Candle
from src.main_analyze import main, parse_args

DATA_PATHS_YAML = """
data:
  raw:
    candles: data/raw/candles
    documents: data/raw/documents
  reports:
    analysis: data/reports/analysis
"""


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATA_ROOT", raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "data_paths.yaml").write_text(DATA_PATHS_YAML, encoding="utf-8")
    (config_dir / "data_sources.yaml").write_text(
        "assets:\n  - symbol: AAPL\n    company_names: [Apple]\n",
        encoding="utf-8",
    )
    return tmp_path


def _save_candles(root: Path, n: int = 30) -> None:
    candles_dir = root / "data" / "raw" / "candles"
    candles_dir.mkdir(parents=True)
    start = datetime(2025, 1, 2, tzinfo=timezone.utc)
    ParquetCandleRepository(output_dir=candles_dir).save_candles(
        "AAPL",
        [
            Candle(
                timestamp=start + timedelta(days=i),
                open=50.0 + i,
                high=51.0 + i,
                low=49.0 + i,
                close=50.0 + i,
                volume=500.0,
            )
            for i in range(n)
        ],
    )


def test_parse_args_defaults():
    args = parse_args(["--asset", "aapl"])

    assert args.asset == "aapl"
    assert args.start is None
    assert args.no_overwrite is False


def test_main_writes_report(workspace: Path):
    _save_candles(workspace)

    assert main(["--asset", "aapl"]) == 0

    report = workspace / "data" / "reports" / "analysis" / "AAPL" / "analysis_AAPL.json"
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["candleCount"] == 30
    assert data["technicalAnalysis"]["trendAnnotation"]["label"] == "bullish"
    assert data["sentiment"]["combined"]["label"] == "neutral"


def test_main_returns_error_without_candle_storage(workspace: Path):
    assert main(["--asset", "AAPL"]) == 1


def test_main_returns_error_without_candle_file(workspace: Path):
    (workspace / "data" / "raw" / "candles").mkdir(parents=True)

    assert main(["--asset", "AAPL"]) == 1


def test_main_skips_existing_report_when_no_overwrite(workspace: Path):
    _save_candles(workspace)
    assert main(["--asset", "AAPL"]) == 0

    assert main(["--asset", "AAPL", "--no-overwrite"]) == 0


def test_main_rejects_malformed_start(workspace: Path):
    _save_candles(workspace)

    assert main(["--asset", "AAPL", "--start", "not-a-date"]) == 1


def test_main_start_filters_candles(workspace: Path):
    _save_candles(workspace)

    assert main(["--asset", "AAPL", "--start", "2025-01-22"]) == 0

    report = workspace / "data" / "reports" / "analysis" / "AAPL" / "analysis_AAPL.json"
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["candleCount"] == 10
    assert data["pricePerformance"]["firstClose"] == 70.0


def test_no_overwrite_help_describes_skip(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert "Skip the run if a report already exists" in help_text


def test_main_no_overwrite_keeps_existing_report(workspace: Path):
    _save_candles(workspace)
    assert main(["--asset", "AAPL"]) == 0
    report = workspace / "data" / "reports" / "analysis" / "AAPL" / "analysis_AAPL.json"
    report.write_text("{}", encoding="utf-8")

    assert main(["--asset", "AAPL", "--no-overwrite"]) == 0
    assert report.read_text(encoding="utf-8") == "{}"
