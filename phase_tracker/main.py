"""
Phase Tracker Application

Builds the FastAPI app around a single WorkflowService instance.

Run locally:
    python -m phase_tracker.main
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import LOG_LEVEL, LOG_FORMAT, HOST, PORT, get_seed_file
from .router import router as phase_router
from .workflow_loader import load_workflow_file, seed_workflow
from .workflow_service import WorkflowService

# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT
)
logger = logging.getLogger("phase_tracker")


def create_app(
    service: Optional[WorkflowService] = None,
    seed_file: Optional[Path] = None,
) -> FastAPI:
    """
    Create the application.

    Args:
        service: Workflow service to serve (a new, empty one if omitted)
        seed_file: YAML workflow definition to seed the service with
                   (a new service defaults to PHASE_TRACKER_SEED_FILE)
    """
    app = FastAPI(
        title="Phase Tracker",
        description="Sequential phase/task workflow with completion gating",
        version=__version__,
    )

    if service is None:
        service = WorkflowService()
        seed_file = seed_file or get_seed_file()
    if seed_file is not None:
        seed_workflow(service, load_workflow_file(seed_file))

    app.state.workflow_service = service
    app.include_router(phase_router)

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "version": __version__,
            "phases": len(service.store),
        }

    logger.info(f"Phase Tracker v{__version__} ready ({len(service.store)} phases)")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
