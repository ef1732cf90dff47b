"""Per-user directories for sprint, resolved through platformdirs."""

from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "sprint"


class GlobalPath:
    """Global path management for sprint directories."""

    @classmethod
    def data(cls) -> str:
        """Application data directory."""
        return user_data_dir(APP_NAME)

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return str(Path(cls.data()) / "log")

    @classmethod
    def config(cls) -> str:
        """Configuration directory."""
        return user_config_dir(APP_NAME)
