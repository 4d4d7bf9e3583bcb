"""Best score persisted across games and sessions."""

import logging

from slide2048.storage.store import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

# ##>: Key of the best score in the store.
BEST_SCORE_KEY = 'best2048'


class BestScoreRecord:
    """
    Read and write the best score through a key-value store.

    A failing store never interrupts the game: the failure is logged once, the record falls back to
    memory and keeps the best score for the rest of the session.

    Parameters
    ----------
    store : KeyValueStore
        Store holding the score as a decimal string.
    key : str, optional
        Key of the best score (default ``best2048``).
    """

    def __init__(self, store: KeyValueStore, key: str = BEST_SCORE_KEY):
        self.store = store
        self.key = key
        self.value = 0
        self.degraded = False

    def load(self) -> int:
        """
        Read the best score.

        Returns
        -------
        int
            The stored best score, or 0 when it is missing, not a number or negative.
        """
        if self.degraded:
            return self.value

        try:
            raw = self.store.get(self.key)
        except StorageError as error:
            self._degrade(error)
            return self.value

        self.value = parse_score(raw)
        return self.value

    def save(self, value: int) -> None:
        """Remember a new best score and write it to the store if it is still available."""
        self.value = int(value)
        if self.degraded:
            return

        try:
            self.store.set(self.key, str(self.value))
        except StorageError as error:
            self._degrade(error)

    def _degrade(self, error: StorageError) -> None:
        logger.warning('Best score storage unavailable, keeping it in memory: %s', error)
        self.degraded = True


def parse_score(raw: str | None) -> int:
    """Convert a stored string into a score, defaulting to 0."""
    if raw is None:
        return 0
    try:
        value = int(float(raw.strip()))
    except (ValueError, OverflowError):
        return 0
    return max(value, 0)
