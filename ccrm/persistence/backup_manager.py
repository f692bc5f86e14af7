"""
Filesystem backups of the data directory.
"""

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..config import AppConfig
from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class BackupManager:
    """Copies the data directory into timestamped backup folders."""
    
    def __init__(self, config: AppConfig):
        self._config = config
    
    def backup(self, now: Optional[datetime] = None) -> Path:
        """Copy the data directory to ``backup_<timestamp>`` and return the destination."""
        timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        destination = self._config.backup_directory / f"backup_{timestamp}"
        source = self._config.data_directory
        try:
            self._config.backup_directory.mkdir(parents=True, exist_ok=True)
            if source.is_dir():
                shutil.copytree(source, destination, dirs_exist_ok=True)
            else:
                destination.mkdir(parents=True, exist_ok=True)
        except (OSError, shutil.Error) as e:
            logger.error("Backup failed: %s", e)
            raise PersistenceError(f"Backup failed: {e}")
        
        logger.info("Backup successful: %s", destination)
        return destination
    
    def backup_size(self) -> int:
        """Total size in bytes of every backup taken so far."""
        return directory_size(self._config.backup_directory)


def directory_size(path: Union[str, Path]) -> int:
    """Recursively sum file sizes under ``path``."""
    path = Path(path)
    try:
        if not path.is_dir():
            return path.stat().st_size
        return sum(directory_size(child) for child in path.iterdir())
    except OSError as e:
        logger.error("Error calculating size for %s: %s", path, e)
        return 0
