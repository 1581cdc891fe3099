from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping

ENV_PREFIX = "ORDER_DESK_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    reject_negative_amounts: bool = False

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default).strip()

        port_raw = get("PORT", "8000")
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port_raw!r}") from None

        return Settings(
            log_level=get("LOG_LEVEL", "INFO").upper(),
            host=get("HOST", "127.0.0.1"),
            port=port,
            reject_negative_amounts=get("REJECT_NEGATIVE_AMOUNTS", "0").lower() in _TRUTHY,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
