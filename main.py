import argparse
import sys

from loguru import logger

from src.core.config import ConfigManager
from src.core.logging import setup_logging
from src.core.commands import CommandDispatcher
from src.home import RemoteMenu, build_home


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Smart home remote with undo")
    parser.add_argument("--config", default="config.json", help="Path to config file (.json or .toml)")
    parser.add_argument("--debug", action="store_true", help="Force debug logging")
    args = parser.parse_args(argv)

    config = ConfigManager(args.config)
    general = config.data.general
    setup_logging(debug_mode=args.debug or general.debug_mode, log_dir=general.log_dir)

    home = build_home(config.data.home)
    dispatcher = CommandDispatcher(capacity=config.data.history.capacity)
    logger.debug(f"Dispatcher ready (capacity={dispatcher.capacity})")

    try:
        RemoteMenu(dispatcher, home).run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
