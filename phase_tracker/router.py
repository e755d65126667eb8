"""
Phase Tracker API Router

FastAPI routes over the workflow service. Routes translate requests into
service calls and WorkflowError subclasses into HTTP errors; they hold no
workflow rules of their own.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from .api_models import (
    CreatePhaseRequest,
    CreateTaskRequest,
    CompleteTaskRequest,
    UndoTaskRequest,
    PhaseResponse,
)
from .errors import (
    WorkflowError,
    ValidationError,
    NotFoundError,
)
from .workflow_service import WorkflowService

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
logger = logging.getLogger("phase_router")

# -----------------------------------------------------------------------------
# Router Setup
# -----------------------------------------------------------------------------
router = APIRouter(prefix="/phases", tags=["Phases"])


def get_workflow_service(request: Request) -> WorkflowService:
    """Get the workflow service bound to the running app."""
    return request.app.state.workflow_service


def _to_http_error(error: WorkflowError) -> HTTPException:
    """Map a workflow error to an HTTP error carrying its structured body."""
    if isinstance(error, ValidationError):
        status_code = 400
    elif isinstance(error, NotFoundError):
        status_code = 404
    else:
        # DuplicateNameError, GatingError, InvalidStateError
        status_code = 409
    logger.debug(f"{error.code} -> HTTP {status_code}")
    return HTTPException(status_code=status_code, detail=error.to_dict())


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@router.get("", response_model=Dict[str, PhaseResponse])
def list_phases(service: WorkflowService = Depends(get_workflow_service)):
    """Get all phases keyed by phase ID, in sequence order."""
    return {
        phase_id: PhaseResponse.from_phase(phase)
        for phase_id, phase in service.get_all_phases().items()
    }


@router.get("/{phase_id}", response_model=PhaseResponse)
def get_phase(phase_id: str, service: WorkflowService = Depends(get_workflow_service)):
    """Get a single phase."""
    try:
        return PhaseResponse.from_phase(service.get_phase(phase_id))
    except WorkflowError as e:
        raise _to_http_error(e)


@router.post("", response_model=PhaseResponse, status_code=201)
def create_phase(
    request: CreatePhaseRequest,
    service: WorkflowService = Depends(get_workflow_service),
):
    """Create a phase at the end of the sequence."""
    try:
        phase = service.create_phase(request.name, request.description)
    except WorkflowError as e:
        raise _to_http_error(e)
    return PhaseResponse.from_phase(phase)


@router.post("/tasks", response_model=PhaseResponse, status_code=201)
def create_task(
    request: CreateTaskRequest,
    service: WorkflowService = Depends(get_workflow_service),
):
    """Add a task to a phase; returns the updated phase."""
    try:
        phase = service.create_task(request.name, request.description, request.phase_id)
    except WorkflowError as e:
        raise _to_http_error(e)
    return PhaseResponse.from_phase(phase)


@router.patch("/tasks/complete", response_model=PhaseResponse)
def complete_task(
    request: CompleteTaskRequest,
    service: WorkflowService = Depends(get_workflow_service),
):
    """Set a task's completed flag; returns the updated phase."""
    try:
        phase = service.complete_task(request.phase_id, request.task_id, request.completed)
    except WorkflowError as e:
        raise _to_http_error(e)
    return PhaseResponse.from_phase(phase)


@router.patch("/tasks/undo", response_model=PhaseResponse)
def undo_task(
    request: UndoTaskRequest,
    service: WorkflowService = Depends(get_workflow_service),
):
    """Reopen a completed task; returns the updated phase."""
    try:
        phase = service.undo_task(request.phase_id, request.task_id)
    except WorkflowError as e:
        raise _to_http_error(e)
    return PhaseResponse.from_phase(phase)
