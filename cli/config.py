"""Configuration management for Filestorage CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.constants import CHUNK_LENGTH, DEFAULT_CONTRACT_PORT
from common.logging_config import get_logger
from cli.constants import DOWNLOADS_DIR

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "contract_host": os.environ.get("FS_CONTRACT_HOST", "localhost"),
        "contract_port": int(os.environ.get("FS_CONTRACT_PORT", str(DEFAULT_CONTRACT_PORT))),
        "timeout": 30,
        "chunk_length": CHUNK_LENGTH,
        "downloads_dir": DOWNLOADS_DIR,
        "ledger_path": os.environ.get("FS_LEDGER_PATH"),
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.filestorage/config.json)
        """
        self.config_path = config_path
        self.data = self._load()
        self._ledger_override: Optional[str] = None

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.filestorage' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Unreadable config {self.config_path}: {e}; backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.warning(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config: {e}")

    def get_owner_address(self) -> Optional[str]:
        """
        Get stored owner address.

        Returns:
            Owner address or None if not set
        """
        return self.data.get('owner_address')

    def set_owner_address(self, address: str) -> None:
        """
        Set owner address and save to file.

        Args:
            address: Account address (e.g., "0x77333Da3...")
        """
        self.data['owner_address'] = address
        self.save()

    def get_base_url(self) -> str:
        """
        Get contract service base URL.

        Returns:
            Base URL string (e.g., "http://localhost:8000")
        """
        host = self.data.get('contract_host', 'localhost')
        port = self.data.get('contract_port', DEFAULT_CONTRACT_PORT)
        return f"http://{host}:{port}"

    def get_timeout(self) -> int:
        return self.data.get('timeout', 30)

    def get_chunk_length(self) -> int:
        return int(self.data.get('chunk_length', CHUNK_LENGTH))

    def get_downloads_dir(self) -> Path:
        return Path(self.data.get('downloads_dir', DOWNLOADS_DIR))

    def get_ledger_path(self) -> Optional[str]:
        """
        Get the local ledger file, if the CLI should bypass the contract service.

        Returns:
            SQLite ledger path or None for HTTP mode
        """
        return self._ledger_override or self.data.get('ledger_path')

    def set_ledger_path(self, path: str) -> None:
        """Use a local ledger for this session without persisting it."""
        self._ledger_override = path
