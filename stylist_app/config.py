"""Configuration helpers for the wardrobe stylist app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_WARDROBE_DB_PATH = "data/wardrobe.db"
DEFAULT_MAX_SUGGESTIONS = 3
DEFAULT_MAX_ATTEMPTS = 200


@dataclass
class StylistConfig:
    """Configuration values for the stylist app.

    ``enumeration_threshold`` switches the generator to exhaustive enumeration
    for wardrobes with at most that many distinct combinations; ``0`` keeps
    pure random sampling.
    """

    wardrobe_db_path: str = DEFAULT_WARDROBE_DB_PATH
    default_max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    enumeration_threshold: int = 0
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; environment variables take precedence over file values.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        def get_int(key: str, default: int) -> int:
            raw = get_value(key)
            if raw is None or str(raw).strip() == "":
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise ValueError(f"Config value '{key}' must be an integer, got {raw!r}") from exc

        return cls(
            wardrobe_db_path=str(get_value("wardrobe_db_path") or DEFAULT_WARDROBE_DB_PATH),
            default_max_suggestions=get_int("default_max_suggestions", DEFAULT_MAX_SUGGESTIONS),
            max_attempts=get_int("max_attempts", DEFAULT_MAX_ATTEMPTS),
            enumeration_threshold=get_int("enumeration_threshold", 0),
            log_level=str(get_value("log_level") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
