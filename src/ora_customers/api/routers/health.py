"""
ora_customers.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`), independent of database state.
- Provide readiness probe (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from ora_customers.api.deps import gateway_dep
from ora_customers.db.gateway import Gateway

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(gateway: Gateway = Depends(gateway_dep)) -> dict[str, str]:
    try:
        await gateway.ping()
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Orchestrators typically use /healthz for liveness and /readyz for readiness gating.
