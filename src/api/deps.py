"""FastAPI dependency injection."""

import logging
import threading
from collections import OrderedDict

from src.config import settings
from src.engine.random_sequence import RandomSequence

logger = logging.getLogger(__name__)


class SequenceRegistry:
    """In-memory random sequences, one per calculator session.

    Holds at most max_sessions entries; opening one more evicts the least
    recently used session.
    """

    def __init__(self, seed: int | None = None, max_sessions: int = settings.max_sessions):
        self._seed = seed
        self._max_sessions = max(max_sessions, 1)
        self._sequences: OrderedDict[str, RandomSequence] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sequences)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sequences

    def get(self, session_id: str) -> RandomSequence:
        with self._lock:
            sequence = self._sequences.get(session_id)
            if sequence is not None:
                self._sequences.move_to_end(session_id)
                return sequence

            logger.info("Opening random sequence for session %s", session_id)
            sequence = RandomSequence(seed=self._seed)
            self._sequences[session_id] = sequence
            while len(self._sequences) > self._max_sessions:
                evicted, _ = self._sequences.popitem(last=False)
                logger.info("Evicting random sequence for session %s", evicted)
            return sequence

    def reset(self, session_id: str) -> bool:
        """Clear a session's draws. Returns False if the session is unknown."""
        with self._lock:
            sequence = self._sequences.get(session_id)
            if sequence is None:
                return False
            sequence.reset()
            return True


_registry = SequenceRegistry(seed=settings.random_seed, max_sessions=settings.max_sessions)


def get_sequence_registry() -> SequenceRegistry:
    return _registry
