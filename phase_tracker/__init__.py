"""
Phase Tracker

Tracks a sequential workflow of phases, each holding tasks that must all be
completed before the phase is done and before any task of the next phase may
be completed.

Layers:
- workflow_model: Phase and Task records, identifier generation
- errors: Structured workflow errors
- phase_store: In-memory, insertion-ordered phase store
- workflow_service: Creation validation, completion gating, undo
- workflow_loader: YAML workflow seeding
- router / main: FastAPI surface over the workflow service
"""

__version__ = "0.1.0"
