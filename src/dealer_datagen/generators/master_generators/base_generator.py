"""
Base generator infrastructure for entity generation.

Provides core functionality: shared random source, reference time,
precondition checks on counts and dependency collections, and progress
reporting.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Callable

from dealer_datagen.config.models import GenerationConfig
from dealer_datagen.shared.exceptions import (
    EmptyRolePoolError,
    GenerationParameterError,
    MissingDependencyError,
)
from dealer_datagen.shared.models import Employee, EmployeeRole, Money

from ..progress_tracker import CollectionProgressTracker
from ..utils import AddressGenerator, IdentifierGenerator, RandomSource

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, float, str | None, dict[str, int] | None], None]


class BaseGenerator:
    """
    Base class providing shared infrastructure for entity factories.

    Handles:
    - The injectable random source every factory draws from
    - The reference time used to place generated dates
    - Count and dependency validation
    - Progress tracking and callbacks
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Initialize base generator infrastructure.

        Args:
            config: Generation configuration (defaults when omitted)
            random_source: Source of randomness; built from ``config.seed``
                when omitted
        """
        self.config = config or GenerationConfig()
        self.random = random_source or RandomSource(self.config.seed)
        self.reference_time: datetime = self.config.resolve_reference_time()

        self.addresses = AddressGenerator(self.random)
        self.identifiers = IdentifierGenerator(self.random)

        self._progress_callback: ProgressCallback | None = None
        self._progress_tracker: CollectionProgressTracker | None = None

    def set_progress_callback(self, callback: ProgressCallback | None) -> None:
        """Register or clear a callback for per-collection progress updates."""
        self._progress_callback = callback

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_count(count: int, entity: str) -> None:
        """
        Raises:
            GenerationParameterError: If count is not a non-negative integer
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise GenerationParameterError(
                f"Count for {entity} must be an integer",
                parameter="count",
                value=count,
            )
        if count < 0:
            raise GenerationParameterError(
                f"Count for {entity} must be >= 0", parameter="count", value=count
            )

    @staticmethod
    def _require(collection: Sequence | None, dependency: str, dependent: str) -> None:
        """
        Raises:
            MissingDependencyError: If the dependency collection is missing or empty
        """
        if not collection:
            raise MissingDependencyError(dependent, dependency)

    @staticmethod
    def _role_pool(
        employees: Sequence[Employee], role: EmployeeRole, dependent: str
    ) -> list[Employee]:
        """
        Filter the generated employees down to one role.

        Raises:
            EmptyRolePoolError: If no employee holds the role
        """
        pool = [e for e in employees if e.Role == role]
        if not pool:
            raise EmptyRolePoolError(dependent, role.value)
        return pool

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _money(self, min_value: Decimal | int | str, max_value: Decimal | int | str) -> Money:
        """Draw a US dollar amount with cent precision."""
        return Money.usd(self.random.random_currency(min_value, max_value))

    def _emit_progress(
        self,
        collection: str,
        progress: float,
        message: str | None = None,
        counts: dict[str, int] | None = None,
    ) -> None:
        """Send progress to the tracker and the registered callback (if any)."""
        clamped = max(0.0, min(1.0, progress))

        if self._progress_tracker and collection in self._progress_tracker.get_all_states():
            self._progress_tracker.update_progress(collection, clamped)

        if not self._progress_callback:
            return

        try:
            self._progress_callback(collection, clamped, message, counts)
        except Exception as exc:
            logger.debug(
                "Progress callback failed for %s: %s",
                collection,
                exc,
                exc_info=True,
            )
