"""
Configuration for the merge engine.
"""

import os
from dataclasses import dataclass, field

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def _env_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f'Expected a boolean value, got {raw!r}')


@dataclass
class EngineConfig:
    """
    Rules of a game: grid size, spawn weights and opening.

    Attributes
    ----------
    size : int
        Dimension of the square grid.
    tile_probs : dict[int, float]
        Probability of each spawned tile value.
    start_tiles : int
        Number of tiles spawned on an empty board when a game starts.
    check_on_start : bool
        Whether a new game whose opening board has no legal move ends immediately.
    """

    size: int = 4
    tile_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    start_tiles: int = 2
    check_on_start: bool = True

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f'size must be a positive integer, got {self.size!r}')
        if not 0 <= self.start_tiles <= self.size**2:
            raise ValueError(f'start_tiles must be between 0 and {self.size ** 2}, got {self.start_tiles}')
        if not self.tile_probs:
            raise ValueError('tile_probs must not be empty')
        for value, prob in self.tile_probs.items():
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0 or value & (value - 1):
                raise ValueError(f'Spawned tiles must be positive powers of two, got {value}')
            if prob < 0:
                raise ValueError(f'Spawn probability of {value} must be non-negative, got {prob}')
        if abs(sum(self.tile_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'tile_probs must sum to 1, got {sum(self.tile_probs.values())}')

    @property
    def tile_values(self) -> list[int]:
        """Values a spawn can produce."""
        return list(self.tile_probs)

    @property
    def tile_weights(self) -> list[float]:
        """Probabilities aligned with ``tile_values``."""
        return list(self.tile_probs.values())

    @classmethod
    def from_env(cls, prefix: str = 'MERGEGRID_') -> 'EngineConfig':
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        prefix : str, optional
            Prefix of the variables (default is ``MERGEGRID_``).

        Returns
        -------
        EngineConfig
            Defaults overridden by ``<prefix>SIZE``, ``<prefix>START_TILES`` and ``<prefix>CHECK_ON_START``.
        """
        overrides = {}
        if f'{prefix}SIZE' in os.environ:
            overrides['size'] = int(os.environ[f'{prefix}SIZE'])
        if f'{prefix}START_TILES' in os.environ:
            overrides['start_tiles'] = int(os.environ[f'{prefix}START_TILES'])
        if f'{prefix}CHECK_ON_START' in os.environ:
            overrides['check_on_start'] = _env_bool(os.environ[f'{prefix}CHECK_ON_START'])
        return cls(**overrides)


def default_config() -> EngineConfig:
    """
    Create the classic 4x4 configuration.

    Returns
    -------
    EngineConfig
        Two opening tiles, 90% twos and 10% fours.
    """
    return EngineConfig()
