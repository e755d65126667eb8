"""
Pytest configuration for Phase Tracker tests.

Provides a fresh store/service per test and helpers for building phases.
"""

import pytest

from phase_tracker.phase_store import PhaseStore
from phase_tracker.workflow_service import WorkflowService


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def store():
    """Create an empty phase store."""
    return PhaseStore()


@pytest.fixture
def service(store):
    """Create a workflow service over the test store."""
    return WorkflowService(store)


@pytest.fixture
def sample_workflow_yaml():
    """Return a small two-phase workflow definition."""
    return """phases:
  - name: Foundation
    description: Set up the company
    tasks:
      - name: Setup virtual office
        description: Pick an address
        completed: true
      - name: Set mission & vision
        description: Write it down
        completed: true
  - name: Discovery
    description: Find the product
    tasks:
      - name: Create roadmap
        description: Plan the quarter
"""


@pytest.fixture
def sample_workflow_file(tmp_path, sample_workflow_yaml):
    """Write the sample workflow definition to a file."""
    path = tmp_path / "workflow.yaml"
    path.write_text(sample_workflow_yaml)
    return path


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def add_phase_with_tasks(service: WorkflowService, name: str, task_count: int = 1):
    """Create a phase with `task_count` tasks and return it."""
    phase = service.create_phase(name, f"{name} description")
    for i in range(task_count):
        service.create_task(f"{name} task {i}", "task description", phase.phase_id)
    return phase


def complete_all(service: WorkflowService, phase) -> None:
    """Complete every task of a phase, in order."""
    for task in phase.tasks:
        service.complete_task(phase.phase_id, task.task_id, True)
