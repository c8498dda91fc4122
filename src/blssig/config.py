"""Environment-aware configuration for blssig."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .context import DEFAULT_DST
from .errors import ConfigurationError

ENV_PREFIX = "BLSSIG_"


@dataclass
class StoreSettings:
    private_key_path: str = "private_key.pem"
    public_key_path: str = "public_key.pem"

    def validate(self) -> None:
        if not self.private_key_path:
            raise ConfigurationError("Private key path must be provided.")
        if not self.public_key_path:
            raise ConfigurationError("Public key path must be provided.")
        if os.path.abspath(self.private_key_path) == os.path.abspath(self.public_key_path):
            raise ConfigurationError("Private and public key slots must be different files.")


@dataclass
class LoggingSettings:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def validate(self) -> None:
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ConfigurationError(f"Unknown logging level: {self.level!r}")
        if not self.format:
            raise ConfigurationError("Logging format must be provided.")


@dataclass
class Settings:
    store: StoreSettings = field(default_factory=StoreSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    dst: bytes = DEFAULT_DST

    def validate(self) -> None:
        self.store.validate()
        self.logging.validate()
        if not self.dst or len(self.dst) > 255:
            raise ConfigurationError("Domain separation tag must be 1..255 bytes.")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from defaults plus BLSSIG_* environment overrides."""
    env = os.environ if environ is None else environ
    settings = Settings()

    if env.get(ENV_PREFIX + "PRIVATE_KEY_PATH"):
        settings.store.private_key_path = env[ENV_PREFIX + "PRIVATE_KEY_PATH"]
    if env.get(ENV_PREFIX + "PUBLIC_KEY_PATH"):
        settings.store.public_key_path = env[ENV_PREFIX + "PUBLIC_KEY_PATH"]
    if env.get(ENV_PREFIX + "LOG_LEVEL"):
        settings.logging.level = env[ENV_PREFIX + "LOG_LEVEL"].strip().upper()
    if ENV_PREFIX + "DST" in env:
        try:
            settings.dst = env[ENV_PREFIX + "DST"].encode("ascii")
        except UnicodeEncodeError as exc:
            raise ConfigurationError("BLSSIG_DST must be ASCII.") from exc

    settings.validate()
    return settings
