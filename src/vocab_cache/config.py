import os
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any

import redis.asyncio as aioredis
import yaml
from dotenv import load_dotenv

from vocab_cache.errors import ConfigError

load_dotenv()

DEFAULT_CONFIG_PATH = "config.yaml"

# (yaml section, yaml key) -> settings field
_YAML_FIELDS = {
    ("server", "host"): "api_host",
    ("server", "port"): "api_port",
    ("redis", "host"): "redis_host",
    ("redis", "port"): "redis_port",
    ("redis", "db"): "redis_db",
    ("redis", "password"): "redis_password",
    ("redis", "key_prefix"): "redis_key_prefix",
    ("redis", "socket_timeout"): "redis_socket_timeout",
    ("redis", "cache_time"): "cache_time",
    ("ninjas", "definition_url"): "definition_url",
    ("ninjas", "def_api_key"): "def_api_key",
    ("ninjas", "word_generator_url"): "word_generator_url",
    ("ninjas", "rand_word_api_key"): "rand_word_api_key",
    ("ninjas", "insecure_skip_verify"): "insecure_skip_verify",
    ("ninjas", "timeout"): "upstream_timeout",
    ("logging", "level"): "log_level",
    ("logging", "json"): "log_json",
}

_ENV_FIELDS = {
    "API_HOST": "api_host",
    "API_PORT": "api_port",
    "REDIS_HOST": "redis_host",
    "REDIS_PORT": "redis_port",
    "REDIS_DB": "redis_db",
    "REDIS_PASSWORD": "redis_password",
    "REDIS_KEY_PREFIX": "redis_key_prefix",
    "REDIS_SOCKET_TIMEOUT": "redis_socket_timeout",
    "CACHE_TIME": "cache_time",
    "NINJAS_DEFINITION_URL": "definition_url",
    "NINJAS_DEF_API_KEY": "def_api_key",
    "NINJAS_WORD_GENERATOR_URL": "word_generator_url",
    "NINJAS_RAND_WORD_API_KEY": "rand_word_api_key",
    "NINJAS_INSECURE_SKIP_VERIFY": "insecure_skip_verify",
    "NINJAS_TIMEOUT": "upstream_timeout",
    "LOG_LEVEL": "log_level",
    "LOG_JSON": "log_json",
}


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Values come from, in increasing precedence: the defaults below, a YAML
    config file, and environment variables (``.env`` is honoured).
    """

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str | None = None
    redis_key_prefix: str = ""
    redis_socket_timeout: float = 5.0

    # Cache
    cache_time: int = 3600  # seconds

    # API Ninjas
    definition_url: str = "https://api.api-ninjas.com/v1/dictionary"
    def_api_key: str = ""
    word_generator_url: str = "https://api.api-ninjas.com/v1/randomword"
    rand_word_api_key: str = ""
    insecure_skip_verify: bool = False
    upstream_timeout: float = 10.0

    # Logging
    log_level: str = "info"
    log_json: bool = False

    @property
    def random_word_api_key(self) -> str:
        """Key for the word generator, falling back to the dictionary key."""
        return self.rand_word_api_key or self.def_api_key

    @property
    def redis_address(self) -> str:
        return f"{self.redis_host}:{self.redis_port}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_time <= 0:
            raise ConfigError(f"cache_time must be a positive number of seconds, got {self.cache_time}")

        for name in ("api_port", "redis_port"):
            port = getattr(self, name)
            if not 0 < port < 65536:
                raise ConfigError(f"{name} must be between 1 and 65535, got {port}")

        if self.upstream_timeout <= 0:
            raise ConfigError("upstream timeout must be positive")
        if self.redis_socket_timeout <= 0:
            raise ConfigError("redis socket timeout must be positive")

        if not self.definition_url:
            raise ConfigError("ninjas definition_url is required")
        if not self.word_generator_url:
            raise ConfigError("ninjas word_generator_url is required")


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw YAML/env value to the type of the settings field."""
    field_type = Settings.__dataclass_fields__[name].type
    if value is None:
        return None

    try:
        if field_type is bool:
            if isinstance(value, bool):
                return value
            return str(value).strip().lower() in ("1", "true", "yes", "on")
        if field_type is int:
            if name == "api_port" and isinstance(value, str):
                # listen addresses may be written as ":8080"
                value = value.rsplit(":", 1)[-1]
            return int(value)
        if field_type is float:
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid value for {name}: {value!r}") from e

    return str(value)


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"failed to parse config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    values: dict[str, Any] = {}
    for (section, key), name in _YAML_FIELDS.items():
        block = data.get(section) or {}
        if not isinstance(block, dict):
            raise ConfigError(f"section {section!r} in {path} must be a mapping")
        if key in block:
            values[name] = _coerce(name, block[key])
    return values


def _read_env() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for env_name, name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            values[name] = _coerce(name, raw)
    return values


def load_settings(config_path: str | os.PathLike | None = None) -> Settings:
    """Build Settings from a YAML file and the environment.

    Args:
        config_path: Path to the YAML file. When None, ``VOCAB_CONFIG_PATH``
            is used, then ``config.yaml`` if it exists. A path that was asked
            for explicitly must exist.

    Returns:
        Validated Settings instance

    Raises:
        ConfigError: If the file is unreadable or a value fails validation
    """
    explicit = config_path or os.getenv("VOCAB_CONFIG_PATH")
    path = Path(explicit or DEFAULT_CONFIG_PATH)

    values: dict[str, Any] = {}
    if path.is_file():
        values.update(_read_yaml(path))
    elif explicit:
        raise ConfigError(f"config file not found: {path}")

    values.update(_read_env())

    known = {f.name for f in fields(Settings)}
    return Settings(**{k: v for k, v in values.items() if k in known})


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()


def get_redis_client(settings: Settings) -> aioredis.Redis:
    """Create an async Redis client backed by its own connection pool."""
    return aioredis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
        decode_responses=False,
    )
