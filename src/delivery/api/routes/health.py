"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_location_table():
    """Lazy import to avoid startup failures."""
    from ...data.locations_repository import get_location_table
    return get_location_table()


@router.get("/health/locations", status_code=status.HTTP_200_OK)
def health_locations() -> dict:
    """Check that the location reference table is loaded."""
    try:
        table = _get_location_table()
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load location table: {str(exc)}"
        ) from exc

    settlements = sum(len(region.settlements) for region in table)
    return {
        "service": "locations",
        "healthy": len(table) > 0,
        "regions": len(table),
        "settlements": settlements,
    }
