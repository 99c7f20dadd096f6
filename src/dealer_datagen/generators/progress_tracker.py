"""
Collection progress tracking for dataset assembly.

This module provides CollectionProgressTracker, which records the lifecycle
of each entity collection while a dataset is assembled. Assembly consults
it to refuse building a collection whose dependencies have not completed.
"""

import logging
import threading

from dealer_datagen.shared.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


class CollectionProgressTracker:
    """
    Thread-safe tracker for collection generation states and progress.

    State Transitions:
        not_started → in_progress (when mark_started() called)
        in_progress → completed (when mark_completed() called)

    Readers may poll states from other threads while a single writer
    assembles the dataset.
    """

    STATE_NOT_STARTED = "not_started"
    STATE_IN_PROGRESS = "in_progress"
    STATE_COMPLETED = "completed"

    def __init__(self, collection_names: list[str]) -> None:
        """
        Initialize tracker with the collections to track.

        Args:
            collection_names: Collection names, all starting in 'not_started'
                with 0.0 progress.
        """
        self._lock = threading.Lock()
        self._states: dict[str, str] = {}
        self._progress: dict[str, float] = {}
        self._counts: dict[str, int] = {}

        for name in collection_names:
            self._states[name] = self.STATE_NOT_STARTED
            self._progress[name] = 0.0

        logger.debug(
            f"Initialized CollectionProgressTracker with {len(collection_names)} collections"
        )

    def _check_tracked(self, name: str) -> None:
        if name not in self._states:
            raise KeyError(f"Collection '{name}' is not being tracked")

    def reset(self) -> None:
        """Reset all collections to not_started with 0.0 progress."""
        with self._lock:
            for name in self._states:
                self._states[name] = self.STATE_NOT_STARTED
                self._progress[name] = 0.0
            self._counts.clear()

    def mark_started(self, name: str) -> None:
        """
        Mark a collection as in_progress.

        Raises:
            KeyError: If name is not being tracked.
        """
        with self._lock:
            self._check_tracked(name)
            old_state = self._states[name]
            self._states[name] = self.STATE_IN_PROGRESS

            logger.debug(
                f"Collection '{name}' state transition: "
                f"{old_state} → {self.STATE_IN_PROGRESS}"
            )

    def update_progress(self, name: str, progress: float) -> None:
        """
        Update progress (0.0-1.0) for a collection. Does NOT change state.

        Raises:
            KeyError: If name is not being tracked.
            ValueError: If progress is not between 0.0 and 1.0.
        """
        if not 0.0 <= progress <= 1.0:
            raise ValueError(f"Progress must be between 0.0 and 1.0, got {progress}")

        with self._lock:
            self._check_tracked(name)
            self._progress[name] = progress

    def mark_completed(self, name: str, count: int) -> None:
        """
        Mark a collection as completed with its final record count.

        Raises:
            KeyError: If name is not being tracked.
        """
        with self._lock:
            self._check_tracked(name)
            self._states[name] = self.STATE_COMPLETED
            self._progress[name] = 1.0
            self._counts[name] = count

            logger.debug(f"Collection '{name}' completed with {count:,} records")

    def require_completed(self, dependent: str, *dependencies: str) -> None:
        """
        Verify every dependency completed before ``dependent`` is generated.

        Raises:
            MissingDependencyError: If a dependency has not completed.
            KeyError: If a dependency is not being tracked.
        """
        with self._lock:
            for dependency in dependencies:
                self._check_tracked(dependency)
                if self._states[dependency] != self.STATE_COMPLETED:
                    raise MissingDependencyError(dependent, dependency)

    def get_state(self, name: str) -> str:
        with self._lock:
            self._check_tracked(name)
            return self._states[name]

    def get_progress(self, name: str) -> float:
        with self._lock:
            self._check_tracked(name)
            return self._progress[name]

    def get_collections_by_state(self, state: str) -> list[str]:
        """Get collection names in the given state, in tracking order."""
        with self._lock:
            return [name for name, s in self._states.items() if s == state]

    def get_all_states(self) -> dict[str, str]:
        with self._lock:
            return self._states.copy()

    def get_counts(self) -> dict[str, int]:
        """Record counts of completed collections."""
        with self._lock:
            return self._counts.copy()
