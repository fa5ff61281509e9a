from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ReconcileMode
from .strategies.auto_strategy import AutoStrategy
from .strategies.base import ReconcileStrategy
from .strategies.lock_components_strategy import LockComponentsStrategy
from .strategies.lock_ctc_strategy import LockCtcStrategy


@dataclass
class ReconcileStrategyFactory:
    """Factory Pattern: one strategy per reconcile mode."""

    def for_mode(self, mode: ReconcileMode) -> ReconcileStrategy:
        if mode == ReconcileMode.LOCK_CTC:
            return LockCtcStrategy()
        if mode == ReconcileMode.LOCK_COMPONENTS:
            return LockComponentsStrategy()
        return AutoStrategy()
