"""Gymnasium environment for the prediction game.

Each episode is a single guess: ``reset`` deals a fresh batch of universes and
observes which pawn moves first in each of them; the action is the index of
the color the agent predicts will win; ``step`` plays every universe to the
end and pays one point per universe the guessed color won.

Observation schema:

``{"start_players": np.ndarray(universes,), "size": int}``

Usage:

``env = ApologiesPredictionEnv(size=8, universes=16)``

Nothing is rendered; wrap externally if frames are needed.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

import gymnasium as gym
import numpy as np

from apologies.config import DEFAULT_COLORS, DEFAULT_SIZE
from apologies.multiverse import (
    all_finished,
    count_wins,
    create_universes,
    run_universes,
    winners,
)
from apologies.state import SimulationState
from apologies.types import Color

ObsType = Dict[str, Any]


class ApologiesPredictionEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` for guessing the winning color.

    The action space is ``Discrete(len(colors))``. Episodes always terminate
    after one step; they are truncated instead when ``max_turns`` stopped some
    universe before a winner emerged.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        colors: Sequence[Color] = DEFAULT_COLORS,
        universes: int = 1,
        max_turns: Optional[int] = None,
    ):
        """Create a new environment instance.

        Arguments:
            size: Board dimension (>= 2).
            colors: Pawn colors; action ``i`` guesses ``colors[i]``.
            universes: Number of universes played per episode.
            max_turns: Optional cap on turns per universe.
        """
        from gymnasium import spaces

        if len(colors) == 0:
            raise ValueError("At least one color is required")
        self.size = size
        self.colors: Tuple[Color, ...] = tuple(colors)
        self.universe_count = universes
        self.max_turns = max_turns
        self.universes: List[SimulationState] = []

        self.observation_space = spaces.Dict(
            {
                "start_players": spaces.MultiDiscrete(
                    np.full(universes, len(self.colors), dtype=np.int64)
                ),
                "size": spaces.Discrete(size + 1),
            }
        )
        self.action_space = spaces.Discrete(len(self.colors))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Deal a fresh batch of universes.

        Arguments:
            seed: Seeds ``np_random``, from which the universes' base seed is drawn.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        base_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.universes = create_universes(
            self.universe_count, self.size, self.colors, seed=base_seed
        )
        return self._get_obs(), {"seed": base_seed}

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Play every universe to the end and score the guess.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not self.universes:
            raise RuntimeError("Call reset() before step()")
        if not 0 <= int(action) < len(self.colors):
            raise ValueError(f"Invalid action: {action}")
        guess = self.colors[int(action)]

        self.universes = run_universes(self.universes, max_ticks=self.max_turns)
        reward = float(count_wins(self.universes, guess))
        finished = all_finished(self.universes)
        info: Dict[str, object] = {
            "guess": guess,
            "winners": winners(self.universes),
            "turns": [u.turn for u in self.universes],
        }
        return self._get_obs(), reward, finished, not finished, info

    def _get_obs(self) -> ObsType:
        # turns rotate round-robin, so the start player follows from the turn count
        return {
            "start_players": np.array(
                [_start_player(u) for u in self.universes], dtype=np.int64
            ),
            "size": self.size,
        }


def _start_player(state: SimulationState) -> int:
    return (state.current_player - state.turn) % len(state.board.pawns)
