"""Engine bootstrap and development tick loop."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from .abilities.base import CharacterClass
from .abilities.catalog import load_catalog
from .config import Config, load_config
from .engine import AbilityEngine
from .utils.cli import commands
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread

logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> None:
    """Apply the root and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config: Config) -> AbilityEngine:
    return AbilityEngine(catalog=load_catalog(config.catalog.abilities_path), config=config)


def run(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive ability engine sandbox.")
    parser.add_argument("--class", dest="character_class", default="HighFae")
    parser.add_argument("--level", type=int, default=1)
    args = parser.parse_args(argv)

    load_dotenv()
    config = load_config()
    configure_logging(config)

    engine = bootstrap(config)
    try:
        character_class = CharacterClass.parse(args.character_class)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    character = engine.create_character(character_class, level=args.level)
    logger.info(commands.HELP_TEXT)

    start_cli_thread()
    running = True
    try:
        while running:
            command = poll_command()
            while command is not None:
                if command.name == "quit":
                    running = False
                    break
                commands.execute(engine, character, command)
                command = poll_command()
            engine.update()
            engine.time_manager.sleep_until_next_tick()
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        stop_cli_thread()
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
