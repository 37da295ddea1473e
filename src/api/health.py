"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application and item catalog status."""
    run_service = getattr(request.app.state, "run_service", None)
    if run_service is None:
        return {"status": "error", "catalog": "not_loaded"}
    return {"status": "ok", "catalog": "loaded"}
