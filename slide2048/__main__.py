# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser
from pathlib import Path

from slide2048.config import DEFAULT_STORAGE_PATH, AppConfig, StorageConfig
from slide2048.core import NumpyRandomSource
from slide2048.engine import GridEngine
from slide2048.storage import BestScoreRecord, JsonFileStore
from slide2048.ui import PlaySession, WindowBoard

logger = logging.getLogger("slide2048")


def build_session(config: AppConfig, window: WindowBoard) -> PlaySession:
    """
    Build the engine, the best-score record and the session driving the window.

    Parameters
    ----------
    config: AppConfig
        Game, layout and storage configuration

    window: WindowBoard
        Class to draw the game
    """
    record = BestScoreRecord(JsonFileStore(config.storage.path), key=config.storage.best_key)
    engine = GridEngine(config.game, NumpyRandomSource(config.seed), best_score=record.load())
    return PlaySession(engine, window, record, config.layout)


def main(argv=None):
    parser = ArgumentParser(prog="slide2048", description="Play 2048 with the arrow keys or mouse swipes.")
    parser.add_argument("--storage", type=Path, default=DEFAULT_STORAGE_PATH, help="file keeping the best score")
    parser.add_argument("--seed", type=int, default=None, help="seed of the tile spawner")
    parser.add_argument("--verbose", action="store_true", help="log every move")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = AppConfig(storage=StorageConfig(path=args.storage), seed=args.seed)
    window = WindowBoard(title="2048 Game", size=config.game.size, layout=config.layout)
    session = build_session(config, window)

    window.register_key_handler(session.on_key)
    window.register_pointer_handlers(session.on_press, session.on_release)
    window.register_restart_handler(session.on_restart)

    session.start()
    logger.info("Best score so far: %d", session.engine.best_score)

    # ##: Blocking event loop.
    window.show(block=True)


if __name__ == "__main__":
    main()
