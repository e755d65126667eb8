"""
Test Suite for Phase Tracker

- test_workflow_model: Phase/Task records and identifiers
- test_phase_store: Store primitives and sequence navigation
- test_workflow_service: Validation, gating, undo, done derivation
- test_workflow_loader: YAML workflow seeding
- test_router: HTTP surface
"""
