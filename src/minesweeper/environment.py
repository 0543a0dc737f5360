"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for driving a Board.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, GameState
from .render import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = questioned cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = mine shown after the game ended

    Actions:
        Discrete action space of size width * height.
        Action i sweeps the cell at (x, y) = (i % width, i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.num_cells)

        self._steps = 0
        self._total_safe_cells = self.config.num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**31))
        self.board.reset(seed=board_seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to sweep (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.board.get_observation()
        terminated = self.board.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """
        Sweep a cell and score the outcome.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            Reward value.
        """
        cell = self.board.get_cell(x, y)

        # Invalid action (already revealed or flagged)
        if cell is None or self.board.is_over:
            return -0.1
        if not cell.is_hidden or cell.is_flagged:
            return -0.1

        state = self.board.sweep(x, y)

        if state == GameState.WIN:
            return 10.0
        if state == GameState.LOSE:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.config.num_cells - self.board.hidden_cells,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board), end="")
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel training.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
