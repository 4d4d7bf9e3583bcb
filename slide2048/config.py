"""
Configuration for the 2048 game: rules, window layout and best-score storage.

Defaults reproduce the classic browser game: a 4x4 grid, 2048 to win, 90% of new tiles being 2, tiles of
106 px separated by 15 px gaps, and the best score stored under ``best2048``.
"""

from dataclasses import dataclass, field
from pathlib import Path

# ##>: Default location of the key-value store holding the best score.
DEFAULT_STORAGE_PATH = Path('~/.slide2048/storage.json').expanduser()


@dataclass
class GameConfig:
    """
    Rules of the game.

    Attributes
    ----------
    size : int
        Width and height of the square grid.
    target : int
        Tile value that wins the game.
    start_tiles : int
        Number of tiles spawned when a game starts.
    probability_two : float
        Probability that a spawned tile is a 2 (otherwise a 4).
    """

    size: int = 4
    target: int = 2048
    start_tiles: int = 2
    probability_two: float = 0.9

    def validate(self) -> None:
        """
        Check the configuration is playable.

        Raises
        ------
        ValueError
            If a field is out of range.
        """
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if self.target < 4 or self.target & (self.target - 1):
            raise ValueError(f'target must be a power of two >= 4, got {self.target}')
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must fit on the grid, got {self.start_tiles}')
        if not 0.0 <= self.probability_two <= 1.0:
            raise ValueError(f'probability_two must be in [0, 1], got {self.probability_two}')


@dataclass
class LayoutConfig:
    """Window layout, in pixels."""

    cell: float = 106.0  # Tile edge
    gap: float = 15.0  # Space between tiles
    swipe_threshold: float = 10.0  # Shorter drags are taps

    @property
    def step(self) -> float:
        """Distance between the origins of two neighbouring tiles."""
        return self.cell + self.gap


@dataclass
class StorageConfig:
    """Where the best score is persisted."""

    path: Path = DEFAULT_STORAGE_PATH
    best_key: str = 'best2048'


@dataclass
class AppConfig:
    """Everything needed to start an interactive game."""

    game: GameConfig = field(default_factory=GameConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    seed: int | None = None
