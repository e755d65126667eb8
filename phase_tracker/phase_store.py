"""
Phase Store

In-memory store of phases keyed by phase ID.

Insertion order is significant: it defines the phase sequence used for
gating. The store only offers primitives; it never validates input or
enforces workflow rules, that is the workflow service's job.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .workflow_model import Phase, Task, generate_id

logger = logging.getLogger("phase_store")


class PhaseStore:
    """
    Ordered in-memory mapping of phase ID to Phase.

    Phases are never removed or reordered once created.
    """

    def __init__(self):
        self._phases: Dict[str, Phase] = {}

    def __len__(self) -> int:
        return len(self._phases)

    def __contains__(self, phase_id: object) -> bool:
        return phase_id in self._phases

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    def create_phase(self, name: str, description: str) -> Phase:
        """Append a new, empty phase at the end of the sequence."""
        phase = Phase(phase_id=generate_id(), name=name, description=description)
        self._phases[phase.phase_id] = phase
        logger.debug(f"Stored phase {phase.phase_id} at position {len(self._phases) - 1}")
        return phase

    def add_task(self, phase_id: str, name: str, description: str) -> Task:
        """Append a new, incomplete task to a phase."""
        task = Task(task_id=generate_id(), name=name, description=description)
        self._phases[phase_id].tasks.append(task)
        return task

    def mark_task_completed(self, phase_id: str, task_index: int, completed: bool) -> None:
        """Set a task's completed flag in place. No validation."""
        self._phases[phase_id].tasks[task_index].completed = completed

    def set_phase_done(self, phase_id: str, done: bool) -> None:
        """Set a phase's done flag in place. No validation."""
        self._phases[phase_id].done = done

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    def get_all(self) -> Mapping[str, Phase]:
        """Get a read-only, insertion-ordered view of all phases."""
        return MappingProxyType(self._phases)

    def get_by_phase_id(self, phase_id: str) -> Optional[Phase]:
        """Get phase by ID."""
        return self._phases.get(phase_id)

    def get_by_name(self, name: str) -> Optional[Phase]:
        """Get phase by exact (case-sensitive) name."""
        for phase in self._phases.values():
            if phase.name == name:
                return phase
        return None

    def get_task_index(self, phase_id: str, task_id: str) -> Optional[int]:
        """Get a task's position within its phase, or None if not found."""
        phase = self._phases.get(phase_id)
        if phase is None:
            return None
        for index, task in enumerate(phase.tasks):
            if task.task_id == task_id:
                return index
        return None

    # -------------------------------------------------------------------------
    # Sequence Navigation
    # -------------------------------------------------------------------------

    def get_previous_phase_id(self, phase_id: str) -> Optional[str]:
        """Get the ID of the phase created just before this one."""
        return self._neighbour(phase_id, step=-1)

    def get_next_phase_id(self, phase_id: str) -> Optional[str]:
        """Get the ID of the phase created just after this one."""
        return self._neighbour(phase_id, step=1)

    def _neighbour(self, phase_id: str, step: int) -> Optional[str]:
        if phase_id not in self._phases:
            return None

        # Keys only ever hold live phases, so the direct neighbour is the answer
        phase_ids: List[str] = list(self._phases)
        index = phase_ids.index(phase_id) + step
        if 0 <= index < len(phase_ids):
            return phase_ids[index]
        return None
