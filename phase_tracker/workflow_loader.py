"""
Workflow Loader

Seeds a WorkflowService from a YAML workflow definition:

    phases:
      - name: Foundation
        description: Set up the company
        tasks:
          - name: Setup virtual office
            description: Pick an address
            completed: true
      - name: Discovery
        description: Find the product
        tasks: []

Everything goes through the public service operations, so duplicate names
and gating are enforced exactly as for any other caller.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .errors import DuplicateNameError, WorkflowDefinitionError
from .workflow_model import Phase
from .workflow_service import WorkflowService

logger = logging.getLogger("workflow_loader")


def load_workflow_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML workflow definition."""
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise WorkflowDefinitionError([f"{path}: invalid YAML: {e}"])

    logger.info(f"Loaded workflow definition from {path}")
    return data or {}


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_definition(definition: Any) -> List[str]:
    """Return a list of problems with a workflow definition (empty if valid)."""
    if not isinstance(definition, dict):
        return ["definition must be a mapping"]

    phases = definition.get("phases", [])
    if not isinstance(phases, list):
        return ["'phases' must be a list"]

    errors: List[str] = []
    seen_names = set()
    for i, phase in enumerate(phases):
        where = f"phases[{i}]"
        if not isinstance(phase, dict):
            errors.append(f"{where} must be a mapping")
            continue
        for key in ("name", "description"):
            if not _is_text(phase.get(key)):
                errors.append(f"{where}.{key} is required")
        name = phase.get("name")
        if _is_text(name):
            if name in seen_names:
                errors.append(f"{where}.name '{name}' is duplicated")
            seen_names.add(name)

        tasks = phase.get("tasks") or []
        if not isinstance(tasks, list):
            errors.append(f"{where}.tasks must be a list")
            continue
        for j, task in enumerate(tasks):
            task_where = f"{where}.tasks[{j}]"
            if not isinstance(task, dict):
                errors.append(f"{task_where} must be a mapping")
                continue
            for key in ("name", "description"):
                if not _is_text(task.get(key)):
                    errors.append(f"{task_where}.{key} is required")
            if not isinstance(task.get("completed", False), bool):
                errors.append(f"{task_where}.completed must be a boolean")

    return errors


def _gating_errors(service: WorkflowService, phases: List[Dict[str, Any]]) -> List[str]:
    """
    List completed tasks that would sit behind a phase that is not done.

    The phase before the first seeded one is the last phase already in the
    service; the others are judged by their own definitions.
    """
    existing = list(service.get_all_phases().values())
    previous_done = existing[-1].done if existing else True

    errors: List[str] = []
    for i, phase_def in enumerate(phases):
        tasks = phase_def.get("tasks") or []
        if not previous_done:
            for j, task_def in enumerate(tasks):
                if task_def.get("completed", False):
                    errors.append(
                        f"phases[{i}].tasks[{j}] is completed but the phase before it is not done"
                    )
        # A new phase only becomes done by completing all of its tasks
        previous_done = bool(tasks) and all(t.get("completed", False) for t in tasks)

    return errors


def seed_workflow(service: WorkflowService, definition: Dict[str, Any]) -> List[Phase]:
    """
    Create the phases and tasks of a definition, in order.

    The whole definition is checked against the service first (shape, name
    clashes, gating), so a rejected definition leaves the service untouched.
    Completed tasks are then completed phase by phase after everything exists.
    """
    errors = validate_definition(definition)
    if errors:
        raise WorkflowDefinitionError(errors)

    phases = definition.get("phases", [])
    for phase_def in phases:
        if service.store.get_by_name(phase_def["name"]) is not None:
            raise DuplicateNameError(phase_def["name"])

    errors = _gating_errors(service, phases)
    if errors:
        raise WorkflowDefinitionError(errors)

    created: List[Phase] = []
    to_complete = []
    for phase_def in phases:
        phase = service.create_phase(phase_def["name"], phase_def["description"])
        for task_def in phase_def.get("tasks") or []:
            service.create_task(task_def["name"], task_def["description"], phase.phase_id)
            if task_def.get("completed", False):
                to_complete.append((phase.phase_id, phase.tasks[-1].task_id))
        created.append(phase)

    for phase_id, task_id in to_complete:
        service.complete_task(phase_id, task_id, True)

    logger.info(f"Seeded {len(created)} phases ({len(to_complete)} tasks completed)")
    return created
