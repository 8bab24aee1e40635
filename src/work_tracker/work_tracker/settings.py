from __future__ import annotations

import importlib
import logging
import sys
from types import ModuleType

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def load_settings() -> ModuleType:
    """Load ``.env`` then import the settings module selected by APP_ENV."""

    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings: ModuleType) -> None:
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "WARNING"),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def container_from_settings(settings: ModuleType) -> Container:
    return build_container(
        ledger_dir=getattr(settings, "LEDGER_DIR"),
        state_file=getattr(settings, "STATE_FILE"),
        rules=getattr(settings, "WORK_RULES", {}),
    )
