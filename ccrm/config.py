"""
Configuration for the CCRM platform.

AppConfig is built once by the composition root (see ``ccrm.main``) and passed
to the components that need it. There is no global instance.
"""

import json
import logging
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, Union

from .core.exceptions import ConfigurationError

DEFAULT_DATA_DIR = Path("app-data")
DEFAULT_BACKUP_DIR = Path("backups")
MAX_CREDITS_PER_SEMESTER = 20

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AppConfig:
    """Paths and limits for one CCRM session."""
    data_directory: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    backup_directory: Path = field(default_factory=lambda: DEFAULT_BACKUP_DIR)
    max_credits_per_semester: int = MAX_CREDITS_PER_SEMESTER
    log_level: str = "INFO"
    
    def __post_init__(self):
        self.data_directory = Path(self.data_directory)
        self.backup_directory = Path(self.backup_directory)
        if isinstance(self.max_credits_per_semester, bool) \
                or not isinstance(self.max_credits_per_semester, int) \
                or self.max_credits_per_semester < 1:
            raise ConfigurationError(
                f"max_credits_per_semester must be a positive integer, got {self.max_credits_per_semester!r}"
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        self.log_level = str(self.log_level).upper()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(**data)
    
    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AppConfig":
        """Load configuration from a JSON file."""
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read configuration file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return cls.from_dict(data)
    
    def ensure_directories(self) -> None:
        """Create the data and backup directories if missing."""
        try:
            self.data_directory.mkdir(parents=True, exist_ok=True)
            self.backup_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Could not initialize storage directories: {e}")
    
    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['data_directory'] = str(self.data_directory)
        data['backup_directory'] = str(self.backup_directory)
        return data


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``ccrm`` logger."""
    logger = logging.getLogger("ccrm")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
