"""
Game session orchestration.

GameSession ties the grid, the player's tile selection and the solution
dictionary together and owns the game state machine:

    in-progress --valid (last word)--> won
    in-progress --invalid--> lost
    in-progress --valid / duplicate--> in-progress (selection resets after a delay)
    won / lost --full reset--> in-progress
"""

import threading
from typing import Any, Callable, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .grid import Grid
from .models import (
    GameConfig,
    ResetScope,
    SessionSnapshot,
    SessionStatus,
    TileStatus,
    TileView,
    IN_PROGRESS,
    WON,
    LOST,
)
from .scheduler import ScheduledAction, Scheduler, ThreadingScheduler
from .selection import TileSelection
from ..verifiers.dictionary import SolutionDictionary
from ..verifiers.models import ValidationResult
from ..utils.logger import get_logger
from ..utils.share import build_share_text


LOGGER = get_logger(__name__)


class GameSession(BaseModel):
    """
    A single game on a fixed board.

    All mutators take the session lock, so a deferred reset firing on a
    timer thread can't interleave with a submission or a full reset.

    Attributes:
        config: The validated game configuration
        grid: The immutable letter grid
        dictionary: Solution words and validation rules
        selection: The player's current tile path
        score: Number of distinct valid words found
        status: in-progress, won or lost
        solved: Words found so far, in the order they were found
        last_result: Outcome of the latest submission, until the next reset
        history: Every submission outcome of the current game
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    grid: Grid
    dictionary: SolutionDictionary
    selection: TileSelection
    score: int = 0
    status: SessionStatus = IN_PROGRESS
    solved: List[str] = Field(default_factory=list)
    last_result: Optional[ValidationResult] = None
    history: List[ValidationResult] = Field(default_factory=list)
    _lock: Any = None
    _scheduler: Any = None
    _pending: Optional[ScheduledAction] = None
    _pending_token: Optional[object] = None

    def model_post_init(self, __context) -> None:
        """Initialize the lock and default scheduler after model creation."""
        self._lock = threading.RLock()
        self._scheduler = ThreadingScheduler()

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        scheduler: Optional[Scheduler] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a session from a configuration.

        Args:
            config: Optional GameConfig instance
            scheduler: Scheduler for the deferred selection reset
                (defaults to a ThreadingScheduler)
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new in-progress GameSession

        Raises:
            pydantic.ValidationError: If the configuration can't produce a game
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        grid = Grid.from_config(config)
        dictionary = SolutionDictionary(
            solution_words=config.solution_words,
            min_word_length=config.min_word_length,
        )
        session = cls(
            config=config,
            grid=grid,
            dictionary=dictionary,
            selection=TileSelection(grid=grid),
        )
        if scheduler is not None:
            session._scheduler = scheduler

        LOGGER.info(
            "New game %s: %sx%s board, %s words to find",
            config.game_id,
            config.columns,
            config.rows,
            dictionary.size,
        )
        return session

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def current_word(self) -> str:
        return self.selection.current_word

    @property
    def max_score(self) -> int:
        """Size of the effective dictionary."""
        return self.dictionary.size

    @property
    def reset_pending(self) -> bool:
        return self._pending is not None

    @property
    def is_over(self) -> bool:
        return self.status != IN_PROGRESS

    @property
    def accepts_input(self) -> bool:
        """Whether toggles and submissions are currently acted on."""
        return self.status == IN_PROGRESS and not self.reset_pending

    @property
    def can_submit(self) -> bool:
        """Whether the current word is long enough to be worth submitting."""
        return self.accepts_input and len(self.current_word) >= self.dictionary.min_word_length

    def tile_statuses(self) -> Dict[int, TileStatus]:
        """
        Status of every tile for the rendering layer.

        While input is not accepted, unselected tiles are reported as
        disabled, since a toggle would be ignored.
        """
        with self._lock:
            statuses = self.selection.statuses()
            if not self.accepts_input:
                statuses = {
                    tile_id: "disabled" if status == "eligible" else status
                    for tile_id, status in statuses.items()
                }
            return statuses

    def eligible_tiles(self) -> List[int]:
        with self._lock:
            if not self.accepts_input:
                return []
            return self.selection.eligible_tiles()

    def snapshot(self) -> SessionSnapshot:
        """Get a serializable view of the session."""
        with self._lock:
            statuses = self.tile_statuses()
            return SessionSnapshot(
                status=self.status,
                score=self.score,
                max_score=self.max_score,
                current_word=self.current_word,
                can_submit=self.can_submit,
                reset_pending=self.reset_pending,
                columns=self.grid.columns,
                tiles=[
                    TileView(id=t.id, letter=t.letter, status=statuses[t.id])
                    for t in self.grid.tiles
                ],
                solved=list(self.solved),
                last_result=self.last_result,
            )

    def share_text(self) -> str:
        with self._lock:
            return build_share_text(
                self.grid.letters,
                self.grid.columns,
                score=self.score,
                max_score=self.max_score,
                status=self.status,
                game_id=self.config.game_id,
                domain=self.config.domain,
            )

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def toggle_tile(self, tile_id: int) -> bool:
        """
        Select or deselect a tile.

        Ignored once the game is over or while a selection reset is pending.

        Returns:
            True if the selection changed

        Raises:
            ValueError: If the id is not on the board
        """
        with self._lock:
            self.grid.tile(tile_id)
            if not self.accepts_input:
                LOGGER.debug("Ignoring toggle of tile %s (status=%s)", tile_id, self.status)
                return False
            return self.selection.toggle(tile_id)

    def submit_word(self) -> Optional[ValidationResult]:
        """
        Submit the current word.

        Returns:
            The validation result, or None when the submission was ignored
            because the game is over or a reset is still pending
        """
        with self._lock:
            if not self.accepts_input:
                LOGGER.debug(
                    "Ignoring submission (status=%s, reset pending=%s)",
                    self.status,
                    self.reset_pending,
                )
                return None

            word = self.current_word
            result = self.dictionary.validate(word)
            self.last_result = result
            self.history.append(result)
            LOGGER.info("Submitted %r: %s", word, result.outcome)

            if result.outcome == "valid":
                self.score += 1
                self.solved.append(word)
                self.dictionary.solved = set(self.solved)
                if self.score == self.max_score:
                    self.status = WON
                    LOGGER.info("Game won with %s of %s words", self.score, self.max_score)
                    return result

            if result.ends_game:
                self.status = LOST
                LOGGER.info("Game lost with %s of %s words", self.score, self.max_score)
                return result

            self._schedule_selection_reset()
            return result

    def reset_session(self, scope: ResetScope = "full") -> None:
        """
        Reset part or all of the session.

        Args:
            scope: "selection" clears the path (and the displayed outcome while
                the game is in progress); "full" starts the game over

        Raises:
            ValueError: For an unknown scope
        """
        with self._lock:
            if scope == "selection":
                self._cancel_pending()
                self._reset_selection()
            elif scope == "full":
                self._cancel_pending()
                self.score = 0
                self.solved = []
                self.dictionary.solved = set()
                self.history = []
                self.last_result = None
                self.selection.clear()
                self.status = IN_PROGRESS
                LOGGER.info("Game %s restarted", self.config.game_id)
            else:
                raise ValueError(f"Unknown reset scope: {scope!r}")

    # ------------------------------------------------------------------
    # Deferred reset
    # ------------------------------------------------------------------
    def _schedule_selection_reset(self) -> None:
        token = object()
        self._pending_token = token
        action = self._scheduler.schedule(
            self.config.reset_delay,
            self._scheduled_callback(token),
        )
        # A scheduler may run the callback before returning, which consumes the token.
        if self._pending_token is token:
            self._pending = action

    def _scheduled_callback(self, token: object) -> Callable[[], None]:
        def fire() -> None:
            with self._lock:
                if self._pending_token is not token:
                    return
                self._pending = None
                self._pending_token = None
                self._reset_selection()
        return fire

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = None
        self._pending_token = None

    def _reset_selection(self) -> None:
        self.selection.clear()
        if self.status == IN_PROGRESS:
            self.last_result = None
