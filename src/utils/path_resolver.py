# src/utils/path_resolver.py
import os
from pathlib import Path
import yaml
import logging

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATHS_FILE = Path("config") / "data_paths.yaml"


def load_data_paths(config_path: str | Path = DEFAULT_DATA_PATHS_FILE) -> dict[str, Path]:
    with open(config_path, encoding="utf-8") as f:
        paths = yaml.safe_load(f)

    root_env = os.getenv("DATA_ROOT")
    root = Path(root_env) if root_env else None

    logger.info("Resolved data paths | root=%s", root)

    def resolve(p: str) -> Path:
        return root / Path(p) if root else Path(p)

    return {
        "raw_candles": resolve(paths["data"]["raw"]["candles"]),
        "raw_documents": resolve(paths["data"]["raw"]["documents"]),
        "reports": resolve(paths["data"]["reports"]["analysis"]),
    }
