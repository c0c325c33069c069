#!/usr/bin/env python3
"""Main entry point for the local music player."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from local_music_player.domain.shared.messages import LogTemplates
from local_music_player.utils.logging import build_console_handler

if TYPE_CHECKING:
    from local_music_player.config.container import Container

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(build_console_handler())
        logging.getLogger(__name__).warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="local-music-player",
        description="Queue local audio files and start playing the first one.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="audio files to add, in order")
    parser.add_argument("--shuffle", action="store_true", help="enable shuffle after loading")
    parser.add_argument(
        "--repeat",
        choices=["off", "all", "one"],
        default="off",
        help="repeat mode to start in",
    )
    return parser


async def run_session(container: Container, files: Sequence[Path], *, shuffle: bool, repeat: str) -> int:
    """Ingest *files* into a fresh session and report what is playing."""
    from local_music_player.application.queries.get_current import GetCurrentTrackQuery
    from local_music_player.application.queries.get_queue import GetQueueQuery

    logger = logging.getLogger(__name__)
    controller = container.playback_controller

    if shuffle:
        await controller.toggle_shuffle()
    while controller.state.repeat_mode.value != repeat:
        await controller.cycle_repeat_mode()

    tracks = container.ingestor.ingest(files)
    if not tracks:
        logger.warning(LogTemplates.APP_NO_FILES)
        return 0

    await controller.add_tracks(tracks)

    queue = await container.get_queue_handler.handle(GetQueueQuery())
    for index, track in enumerate(queue.tracks):
        marker = ">" if index == queue.current_index else " "
        logger.info("%s %2d. %s - %s", marker, index + 1, track.display_title, track.artist)

    current = await container.get_current_handler.handle(GetCurrentTrackQuery())
    now = current.track.title if current.track is not None else "nothing"
    logger.info(LogTemplates.APP_FINISHED, queue.length, f"{current.transport.value}: {now}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    from local_music_player.config.settings import get_settings

    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING, settings.environment)

    from local_music_player.config.container import create_container

    container = create_container(settings)
    try:
        return asyncio.run(
            run_session(container, args.files, shuffle=args.shuffle, repeat=args.repeat)
        )
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        return 1
    finally:
        container.shutdown()


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
