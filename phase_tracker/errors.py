"""
Workflow Errors

Structured errors raised by the workflow service. Every error carries a
stable code, a human-readable message and a details dict, and is raised
before any state is written.
"""

from typing import Dict, Any, List


class WorkflowError(Exception):
    """Base workflow error with structured details."""
    def __init__(self, code: str, message: str, details: Dict[str, Any] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(WorkflowError):
    def __init__(self, missing_fields: List[str]):
        super().__init__(
            code="VALIDATION_FAILED",
            message=f"{', '.join(missing_fields)} are required fields",
            details={"missing_fields": missing_fields}
        )


class WorkflowDefinitionError(ValidationError):
    """Raised when a YAML workflow definition cannot be seeded."""
    def __init__(self, errors: List[str]):
        WorkflowError.__init__(
            self,
            code="INVALID_DEFINITION",
            message="Workflow definition is invalid",
            details={"errors": errors}
        )


class DuplicateNameError(WorkflowError):
    def __init__(self, name: str):
        super().__init__(
            code="DUPLICATE_NAME",
            message=f"Phase with name '{name}' already exists",
            details={"name": name}
        )


class NotFoundError(WorkflowError):
    pass


class PhaseNotFoundError(NotFoundError):
    def __init__(self, phase_id: str):
        super().__init__(
            code="PHASE_NOT_FOUND",
            message=f"Phase '{phase_id}' not found",
            details={"phase_id": phase_id}
        )


class TaskNotFoundError(NotFoundError):
    def __init__(self, phase_id: str, task_id: str):
        super().__init__(
            code="TASK_NOT_FOUND",
            message=f"Task '{task_id}' not found in phase '{phase_id}'",
            details={"phase_id": phase_id, "task_id": task_id}
        )


class GatingError(WorkflowError):
    def __init__(self, phase_id: str, previous_phase_id: str):
        super().__init__(
            code="PREVIOUS_PHASE_INCOMPLETE",
            message="Cannot mark task as completed until all tasks in previous phase are completed",
            details={"phase_id": phase_id, "previous_phase_id": previous_phase_id}
        )


class InvalidStateError(WorkflowError):
    def __init__(self, phase_id: str, task_id: str):
        super().__init__(
            code="TASK_NOT_COMPLETED",
            message=f"Task '{task_id}' is not completed",
            details={"phase_id": phase_id, "task_id": task_id}
        )
