"""
Configuration loader for PaperShelf.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .exceptions import ConfigurationError

CONFIG_ENV_VAR = "PAPERSHELF_CONFIG"


@dataclass
class PathsConfig:
    """
    Configuration for file system paths.

    Empty values in the file leave the corresponding path unset; the
    application then falls back to the platform data directory.
    """
    app_data_directory: Optional[Path]
    database_path: Optional[Path]
    logs_directory: Optional[Path]


@dataclass
class StorageConfig:
    """Configuration for the SQLite store."""
    database_name: str
    max_connections: int


@dataclass
class IngestionConfig:
    """Configuration for importing papers."""
    papers_subdirectory: str
    default_title: str
    allowed_extensions: List[str]


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str
    viewer_height: int


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    storage: StorageConfig
    ingestion: IngestionConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def default(cls, project_root: Path = None) -> "Config":
        """Build a configuration from built-in defaults, without a file."""
        return cls._parse_config({}, project_root or Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            app_data_directory=cls._resolve_optional_path(paths_data.get("app_data_directory"), project_root),
            database_path=cls._resolve_optional_path(paths_data.get("database_path"), project_root),
            logs_directory=cls._resolve_optional_path(paths_data.get("logs_directory"), project_root)
        )

        storage_data = data.get("storage", {})
        storage = StorageConfig(
            database_name=storage_data.get("database_name", "paper_master.db"),
            max_connections=storage_data.get("max_connections", 5)
        )

        if storage.max_connections < 1:
            raise ConfigurationError(
                "storage.max_connections must be at least 1",
                {"max_connections": storage.max_connections}
            )

        ingestion_data = data.get("ingestion", {})
        ingestion = IngestionConfig(
            papers_subdirectory=ingestion_data.get("papers_subdirectory", "papers"),
            default_title=ingestion_data.get("default_title", "Untitled"),
            allowed_extensions=ingestion_data.get("allowed_extensions", [".pdf"])
        )

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "Paper Master"),
            viewer_height=gui_data.get("viewer_height", 800)
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            storage=storage,
            ingestion=ingestion,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_optional_path(path_str: Optional[str], project_root: Path) -> Optional[Path]:
        """Resolve a path string, making relative paths absolute. Blank means unset."""
        if not path_str:
            return None
        path = Path(path_str).expanduser()
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """
    Locate config.json.

    PAPERSHELF_CONFIG wins when set; otherwise search upward from the
    current directory for config/config.json.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)

    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)
