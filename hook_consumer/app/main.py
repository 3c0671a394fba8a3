import logging
import os
import sys
from typing import Mapping, Optional

from .errors import ConfigError
from .settings import Config, load_config

log = logging.getLogger("consumer")


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def resolve(environ: Optional[Mapping[str, str]] = None) -> Optional[Config]:
    """Load the config once at startup; None means the process must not go on."""
    try:
        config = load_config(environ)
    except ConfigError as e:
        for variable, raw, reason in e.problems:
            log.error("config invalid variable=%s value=%r reason=%s", variable, raw, reason)
        return None

    log.info("config loaded %s", " ".join(f"{k}={v}" for k, v in config.summary().items()))
    return config


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    setup_logging()
    return 0 if resolve(environ) is not None else 1


if __name__ == "__main__":
    sys.exit(main())
