"""
API Models

Pydantic request/response models for the phase tracker HTTP surface.

Request fields are plain strings: emptiness is checked by the workflow
service so that HTTP and in-process callers get the same ValidationError.
"""

from typing import List

from pydantic import BaseModel, Field

from .workflow_model import Phase


class CreatePhaseRequest(BaseModel):
    """Create a phase at the end of the sequence."""
    name: str = Field(..., description="Unique phase name")
    description: str


class CreateTaskRequest(BaseModel):
    """Add a task to an existing phase."""
    name: str
    description: str
    phase_id: str = Field(..., description="Phase to add the task to")


class CompleteTaskRequest(BaseModel):
    """Set a task's completed flag (gated by the previous phase)."""
    phase_id: str
    task_id: str
    completed: bool = True


class UndoTaskRequest(BaseModel):
    """Reopen a completed task."""
    phase_id: str
    task_id: str


class TaskResponse(BaseModel):
    task_id: str
    name: str
    description: str
    completed: bool


class PhaseResponse(BaseModel):
    phase_id: str
    name: str
    description: str
    tasks: List[TaskResponse] = Field(default_factory=list)
    done: bool

    @classmethod
    def from_phase(cls, phase: Phase) -> "PhaseResponse":
        return cls(**phase.to_dict())
