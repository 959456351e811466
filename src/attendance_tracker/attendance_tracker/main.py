from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_DATA_FILE, LOG_PREFIX


def configure_logging(settings) -> None:
    level_name = getattr(settings, "LOG_LEVEL", None)
    if not level_name:
        level_name = "DEBUG" if getattr(settings, "DEBUG", False) else "WARNING"
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.WARNING),
        format=f"{LOG_PREFIX} %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(settings)

    data_file = str(getattr(settings, "DATA_FILE", DEFAULT_DATA_FILE))
    logging.getLogger(__name__).debug("settings=%s data_file=%s", settings_module, data_file)

    return build_container(data_file=data_file)


def main() -> None:
    create_app().menu.run()


if __name__ == "__main__":
    main()
