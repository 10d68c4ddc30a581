"""
Application state shared by every command.

``AppState`` owns the connection pool and the objects built on it. It is
created once at startup with ``AppState.start`` and released once with
``shutdown``; commands receive it explicitly instead of reaching for a
module global.
"""

from pathlib import Path
from typing import Optional

from ..core import get_config, get_logger, Config
from ..database import ConnectionPool, PaperRepository, initialize
from ..ingestion import IngestionPipeline
from ..utils.path_utils import default_app_data_dir

logger = get_logger(__name__)

APP_NAME = "papershelf"


def resolve_app_data_dir(config: Config) -> Path:
    """Configured application data directory, or the platform default."""
    return config.paths.app_data_directory or default_app_data_dir(APP_NAME)


def resolve_database_path(config: Config, app_data_dir: Path) -> Path:
    """Configured database file, or one inside the application data directory."""
    return config.paths.database_path or app_data_dir / config.storage.database_name


class AppState:
    """
    Process-wide handle on the open store.

    Attributes:
        config: Loaded configuration.
        app_data_dir: Root of application-managed storage.
        pool: Open connection pool.
        repository: Paper queries over ``pool``.
        pipeline: Ingestion pipeline writing through ``repository``.
    """

    def __init__(self, config: Config, app_data_dir: Path, pool: ConnectionPool):
        self.config = config
        self.app_data_dir = Path(app_data_dir)
        self.pool = pool
        self.repository = PaperRepository(pool)
        self.pipeline = IngestionPipeline(
            self.repository,
            self.app_data_dir,
            papers_subdirectory=config.ingestion.papers_subdirectory,
            default_title=config.ingestion.default_title
        )

    @classmethod
    async def start(cls, config: Optional[Config] = None) -> "AppState":
        """
        Resolve storage locations and open the database.

        Args:
            config: Configuration to use; defaults to the global config.

        Returns:
            Ready application state.

        Raises:
            StorageInitError: If the database cannot be reached.
        """
        config = config or get_config()

        app_data_dir = resolve_app_data_dir(config)
        db_path = resolve_database_path(config, app_data_dir)

        logger.info(f"Application data directory: {app_data_dir}")

        pool = await initialize(db_path, max_connections=config.storage.max_connections)

        return cls(config, app_data_dir, pool)

    @property
    def papers_dir(self) -> Path:
        return self.app_data_dir / self.config.ingestion.papers_subdirectory

    async def shutdown(self) -> None:
        """Close the connection pool."""
        await self.pool.close()

    async def __aenter__(self) -> "AppState":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()
