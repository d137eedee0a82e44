"""
Editor configuration.

EditorConfig holds the tunable settings of an editor session and is
persisted as JSON. Unknown keys in the file are ignored and missing keys
fall back to their defaults.
"""

from dataclasses import asdict, dataclass
import json
import logging
from pathlib import Path
from typing import Any, Dict

from IP_Libs.constants import (
    CONFIG_FILE,
    DEFAULT_CHECKERBOARD_SQUARES,
    DEFAULT_HISTORY_DEPTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Configuration for an editor session.

    Attributes:
        history_depth: Maximum undo entries (0 = unbounded)
        checkerboard_squares: Squares along each edge of a generated checkerboard
        mosaic_workers: Threads used by the mosaic assignment phase (1 = sequential)
        jpeg_quality: Quality used when saving JPEG files (1-100)
        log_level: Logging level name for the application
    """
    history_depth: int = DEFAULT_HISTORY_DEPTH
    checkerboard_squares: int = DEFAULT_CHECKERBOARD_SQUARES
    mosaic_workers: int = 1
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.history_depth < 0:
            raise ValueError(f"history_depth must be >= 0, got {self.history_depth}")
        if self.checkerboard_squares < 1:
            raise ValueError(
                f"checkerboard_squares must be >= 1, got {self.checkerboard_squares}"
            )
        if self.mosaic_workers < 1:
            raise ValueError(f"mosaic_workers must be >= 1, got {self.mosaic_workers}")
        if not (1 <= self.jpeg_quality <= 100):
            raise ValueError(f"jpeg_quality must be 1-100, got {self.jpeg_quality}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


def load_editor_config(config_path: Path = CONFIG_FILE) -> EditorConfig:
    """
    Load configuration from file, returning defaults if not found.

    A file that cannot be read or holds invalid values is logged and
    ignored.
    """
    path = Path(config_path)
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return EditorConfig()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("config file must contain a JSON object")
        config = EditorConfig.from_dict(payload)
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Could not load config file {path}: {e}")
        return EditorConfig()

    logger.info(f"Loaded configuration from {path}")
    return config


def save_editor_config(config: EditorConfig, config_path: Path = CONFIG_FILE) -> Path:
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    return path
