"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from scratchpad.api.deps import NotebookDep

router = APIRouter()


@router.get("/health")
def health_check(notebook: NotebookDep) -> dict[str, Any]:
    """
    Check the health of the vault.

    Returns:
        dict with status and component health details
    """
    health_status = notebook.health_check()

    # Determine overall status
    all_healthy = all(status[0] for status in health_status.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "components": {
            name: {"healthy": status[0], "message": status[1]}
            for name, status in health_status.items()
        },
    }


@router.get("/health/live")
def liveness_check() -> dict[str, str]:
    """
    Liveness probe.

    Returns:
        Simple OK response if the service is running
    """
    return {"status": "ok"}
