# -*- coding: utf-8 -*-
"""
Play games with a random policy to exercise the engine and report the tiles it reaches.
"""
from collections import Counter

import numpy as np
from tqdm import tqdm

from slide2048.core import NumpyRandomSource
from slide2048.engine import GameStatus, GridEngine


def evaluate(games: int = 100, seed: int | None = None, max_moves: int = 10_000) -> dict:
    """
    Play random games until each one is won or over.

    Parameters
    ----------
    games : int, optional
        Number of games to play.
    seed : int, optional
        Seed shared by the tile spawner and the policy.
    max_moves : int, optional
        Safety bound on the number of moves per game.

    Returns
    -------
    dict
        Frequency of the maximum tile reached, and the best score.
    """
    generator = np.random.default_rng(seed)
    engine = GridEngine(random_source=NumpyRandomSource(seed))
    tiles = []

    with tqdm(range(games), desc="Evaluation") as period:
        for _ in period:
            engine.initialize()
            for _ in range(max_moves):
                moves = engine.legal_moves
                if not moves:
                    break
                engine.apply_move(moves[generator.integers(len(moves))])

            # ##: Save max cells.
            tiles.append(int(np.max(engine.grid)))
            period.set_postfix(score=engine.score, best=engine.best_score, won=engine.status is GameStatus.WON)

    return {"tiles": dict(Counter(tiles)), "best": engine.best_score}


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    result = evaluate(games=args.games, seed=args.seed)
    print(f"Max tiles: {result['tiles']}, best score: {result['best']}")
