"""
Workflow Model

Phase and Task records held by the phase store.

A phase's `done` flag is derived from its tasks by the workflow service;
it is stored on the record so the downstream reset can override it.
"""

import secrets
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List

from .config import ID_BYTES


def generate_id() -> str:
    """Generate an opaque identifier (ID_BYTES random bytes as lowercase hex)."""
    return secrets.token_hex(ID_BYTES)


# -----------------------------------------------------------------------------
# Task Model
# -----------------------------------------------------------------------------
@dataclass
class Task:
    """An atomic unit of work within a phase."""
    task_id: str
    name: str
    description: str
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


# -----------------------------------------------------------------------------
# Phase Model
# -----------------------------------------------------------------------------
@dataclass
class Phase:
    """
    An ordered stage of work.

    Sequencing is defined by the order phases were added to the store,
    never by name.
    """
    phase_id: str
    name: str
    description: str
    tasks: List[Task] = field(default_factory=list)
    done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def all_tasks_completed(self) -> bool:
        """True when every task is completed (vacuously true with no tasks)."""
        return all(task.completed for task in self.tasks)
