"""
Checkpoint Coordination - Orchestration Layer

In-process coordinator for checkpoint/restore notifications. Components opt
in by implementing before_checkpoint/after_restore and being registered
explicitly; nothing registers itself at construction time.
"""

from enum import Enum
from typing import Any, List, Protocol, Tuple, runtime_checkable
import logging

logger = logging.getLogger(__name__)


@runtime_checkable
class CheckpointAware(Protocol):
    """Receives notifications around a checkpoint and after a restore"""

    def before_checkpoint(self, context: Any) -> None: ...

    def after_restore(self, context: Any) -> None: ...


class LifecycleState(Enum):
    CONSTRUCTED = "constructed"
    BEFORE_CHECKPOINT = "before_checkpoint"
    CHECKPOINTED = "checkpointed"
    AFTER_RESTORE = "after_restore"
    RUNNING = "running"


class CheckpointError(Exception):
    """One or more hooks failed; every resource was still notified"""

    def __init__(self, message: str, errors: List[BaseException]):
        super().__init__(message)
        self.errors = errors


class CheckpointException(CheckpointError):
    pass


class RestoreException(CheckpointError):
    pass


class CheckpointStateError(RuntimeError):
    """checkpoint()/restore() called from a state that does not allow it"""


class CheckpointCoordinator:
    """
    Ordered set of checkpoint-aware resources

    before_checkpoint runs in reverse registration order, after_restore in
    registration order. Hooks cannot veto a transition: failures are
    collected and raised once all resources have been notified.
    """

    def __init__(self):
        self._resources: List[CheckpointAware] = []
        self._state = LifecycleState.CONSTRUCTED

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def resources(self) -> Tuple[CheckpointAware, ...]:
        return tuple(self._resources)

    def register(self, resource: CheckpointAware) -> None:
        if not isinstance(resource, CheckpointAware):
            raise TypeError(
                f"{type(resource).__name__} does not implement "
                "before_checkpoint/after_restore"
            )
        if any(r is resource for r in self._resources):
            logger.debug(f"{resource!r} already registered, skipping")
            return

        self._resources.append(resource)
        logger.debug(f"Registered checkpoint resource {resource!r}")

    def checkpoint(self) -> None:
        """Notify every resource that a snapshot is about to be taken"""
        if self._state not in (LifecycleState.CONSTRUCTED, LifecycleState.RUNNING):
            raise CheckpointStateError(f"Cannot checkpoint from {self._state.value}")

        count = len(self._resources)
        logger.info(f"📸 Checkpoint requested, notifying {count} resources")
        self._state = LifecycleState.BEFORE_CHECKPOINT
        try:
            errors = self._notify(reversed(self._resources), "before_checkpoint")
        finally:
            self._state = LifecycleState.CHECKPOINTED

        if errors:
            raise CheckpointException(
                f"{len(errors)} resource(s) failed before checkpoint", errors
            )

    def restore(self) -> None:
        """Notify every resource that the process was restored from a snapshot"""
        if self._state is not LifecycleState.CHECKPOINTED:
            raise CheckpointStateError(f"Cannot restore from {self._state.value}")

        count = len(self._resources)
        logger.info(f"♻️ Restore completed, notifying {count} resources")
        self._state = LifecycleState.AFTER_RESTORE
        try:
            errors = self._notify(list(self._resources), "after_restore")
        finally:
            self._state = LifecycleState.RUNNING

        if errors:
            raise RestoreException(
                f"{len(errors)} resource(s) failed after restore", errors
            )

    def _notify(self, resources, hook: str) -> List[BaseException]:
        errors: List[BaseException] = []
        for resource in list(resources):
            try:
                getattr(resource, hook)(self)
            except Exception as e:
                logger.error(f"❌ {hook} failed for {resource!r}: {e}")
                errors.append(e)
        return errors


def register_component(component: CheckpointAware, coordinator: CheckpointCoordinator):
    """
    Attach an already-constructed component to a coordinator

    Errors from the coordinator reach the caller unchanged.
    """
    coordinator.register(component)
    return component
