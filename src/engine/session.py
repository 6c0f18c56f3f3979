"""
Session holder pairing one player's current state with a word index.

The transition functions are pure; this class only serialises access so
that swapping the index can never happen in the middle of a scan.
"""

import logging
import threading
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..index.models import WordIndex
from . import builder
from .models import EngineConfig, StateSnapshot, WordBuilderState

logger = logging.getLogger(__name__)


class WordBuilderSession(BaseModel):
    """
    Current state of one word building session.

    Attributes:
        index: Read-only word index backing the session
        config: Engine tunables
        state: Latest state; replaced, never mutated, on each edit
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: Any
    config: EngineConfig = Field(default_factory=EngineConfig)
    state: Optional[WordBuilderState] = None
    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def model_post_init(self, __context) -> None:
        """Seed the starting state if none was provided."""
        if self.state is None:
            self.state = builder.new_state(self.index, self.config)

    @classmethod
    def create(cls, index: WordIndex, config: Optional[EngineConfig] = None) -> "WordBuilderSession":
        """Start a session against ``index``."""
        return cls(index=index, config=config or EngineConfig())

    def add_letter(self, letter: str, position: str) -> WordBuilderState:
        """Apply add_letter; on error the current state is kept."""
        with self._lock:
            self.state = builder.add_letter(self.state, self.index, letter, position, self.config)
            return self.state

    def remove_letter(self, position: int) -> WordBuilderState:
        """Apply remove_letter; on error the current state is kept."""
        with self._lock:
            self.state = builder.remove_letter(self.state, self.index, position, self.config)
            return self.state

    def reset(self) -> WordBuilderState:
        with self._lock:
            self.state = builder.reset(self.state, self.index, self.config)
            return self.state

    def swap_index(self, index: WordIndex) -> WordBuilderState:
        """
        Replace the backing index and restart the session against it.

        Waits for any in-flight transition to finish first.
        """
        with self._lock:
            logger.info("Swapping word index (%d -> %d words)", len(self.index.words), len(index.words))
            self.index = index
            self.state = builder.reset(self.state, self.index, self.config)
            return self.state

    def snapshot(self) -> StateSnapshot:
        """Current state as a StateSnapshot."""
        return builder.get_current_state(self.state, self.config)
