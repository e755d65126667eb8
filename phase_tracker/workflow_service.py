"""
Workflow Service

Business rules for the phase/task workflow, built on PhaseStore primitives.

Rules:
- Phase names are unique (case-sensitive exact match)
- A task may only be completed once the previous phase is done
- A phase is done iff all of its tasks are completed
- A phase becoming done re-opens the gate of the next phase (its done
  flag is reset to False)
- Undo is never gated

All checks run before any write, so a rejected call leaves the store
untouched.
"""

import logging
from typing import Mapping, Optional

from .errors import (
    WorkflowError,
    ValidationError,
    DuplicateNameError,
    PhaseNotFoundError,
    TaskNotFoundError,
    GatingError,
    InvalidStateError,
)
from .phase_store import PhaseStore
from .workflow_model import Phase

logger = logging.getLogger("workflow_service")


def _require(**fields: Optional[str]) -> None:
    """Raise ValidationError naming every empty field."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(missing)


class WorkflowService:
    """
    Phase/task workflow over a single PhaseStore.

    The store is injected so that one instance can be shared per process
    (or replaced in tests).
    """

    def __init__(self, store: Optional[PhaseStore] = None):
        self._store = store if store is not None else PhaseStore()

    @property
    def store(self) -> PhaseStore:
        return self._store

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all_phases(self) -> Mapping[str, Phase]:
        """Get all phases in sequence order."""
        return self._store.get_all()

    def get_phase(self, phase_id: str) -> Phase:
        """Get a phase by ID."""
        phase = self._store.get_by_phase_id(phase_id)
        if phase is None:
            raise PhaseNotFoundError(phase_id)
        return phase

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_phase(self, name: str, description: str) -> Phase:
        """Create a phase at the end of the sequence."""
        try:
            _require(name=name, description=description)
            if self._store.get_by_name(name) is not None:
                raise DuplicateNameError(name)
        except WorkflowError as e:
            self._log_rejected("create_phase", e)
            raise

        phase = self._store.create_phase(name, description)
        logger.info(f"Created phase: {name} (id={phase.phase_id})")
        return phase

    def create_task(self, name: str, description: str, phase_id: str) -> Phase:
        """Append an incomplete task to a phase and return the phase."""
        try:
            _require(name=name, description=description, phase_id=phase_id)
            phase = self.get_phase(phase_id)
        except WorkflowError as e:
            self._log_rejected("create_task", e)
            raise

        task = self._store.add_task(phase_id, name, description)
        logger.info(f"Created task: {name} (id={task.task_id}) in phase {phase_id}")
        return phase

    def complete_task(self, phase_id: str, task_id: str, completed: bool) -> Phase:
        """
        Set a task's completed flag.

        The previous-phase gate is checked for both values of `completed`.
        Use undo_task to reopen a task without the gate.
        """
        try:
            phase = self.get_phase(phase_id)
            task_index = self._store.get_task_index(phase_id, task_id)
            if task_index is None:
                raise TaskNotFoundError(phase_id, task_id)

            previous_phase_id = self._store.get_previous_phase_id(phase_id)
            if previous_phase_id is not None and not self._store.get_by_phase_id(previous_phase_id).done:
                raise GatingError(phase_id, previous_phase_id)
        except WorkflowError as e:
            self._log_rejected("complete_task", e)
            raise

        self._store.mark_task_completed(phase_id, task_index, completed)
        logger.info(f"Task {task_id} in phase {phase_id} marked completed={completed}")

        if self._recompute_done(phase):
            self._reopen_next_phase(phase_id)

        return phase

    def undo_task(self, phase_id: str, task_id: str) -> Phase:
        """Mark a completed task incomplete again. Not gated."""
        try:
            _require(phase_id=phase_id, task_id=task_id)
            phase = self.get_phase(phase_id)
            task_index = self._store.get_task_index(phase_id, task_id)
            if task_index is None:
                raise TaskNotFoundError(phase_id, task_id)
            if not phase.tasks[task_index].completed:
                raise InvalidStateError(phase_id, task_id)
        except WorkflowError as e:
            self._log_rejected("undo_task", e)
            raise

        self._store.mark_task_completed(phase_id, task_index, False)
        logger.info(f"Task {task_id} in phase {phase_id} undone")

        self._recompute_done(phase)
        return phase

    # -------------------------------------------------------------------------
    # Derived State
    # -------------------------------------------------------------------------

    def _recompute_done(self, phase: Phase) -> bool:
        """Recompute a phase's done flag from its tasks and return it."""
        done = phase.all_tasks_completed()
        if done != phase.done:
            logger.info(f"Phase {phase.phase_id} done: {phase.done} -> {done}")
        self._store.set_phase_done(phase.phase_id, done)
        return done

    def _reopen_next_phase(self, phase_id: str) -> None:
        """Reset the next phase's done flag so it has to be re-validated."""
        next_phase_id = self._store.get_next_phase_id(phase_id)
        if next_phase_id is None:
            return
        self._store.set_phase_done(next_phase_id, False)
        logger.debug(f"Reset done flag of next phase {next_phase_id}")

    @staticmethod
    def _log_rejected(operation: str, error: WorkflowError) -> None:
        logger.warning(f"{operation} rejected [{error.code}]: {error.message}")
