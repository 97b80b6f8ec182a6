"""
ora_customers.api.routers.customers

Customer list/create endpoints.

Responsibilities:
- Validate and trim incoming bodies.
- Delegate to `CustomerRepo` and own the transaction boundary.
- Convert store failures into JSON errors (500 on read, 400 on rejected write).
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from ora_customers.api.deps import db_session
from ora_customers.db.repositories.customers import CustomerRepo
from ora_customers.db.schema import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from ora_customers.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/api/customers", tags=["customers"])


class CustomerCreateRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # Stored naive UTC; serialize with an explicit "Z".
        return v if v.tzinfo is not None else v.replace(tzinfo=timezone.utc)


def store_error_message(exc: SQLAlchemyError) -> str:
    # Prefer the driver's message (e.g. ORA-00001) over SQLAlchemy's wrapper text.
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


@router.get("", response_model=list[CustomerResponse])
async def list_customers(session: AsyncSession = Depends(db_session)) -> list[CustomerResponse]:
    try:
        customers = await CustomerRepo(session).list_all()
    except SQLAlchemyError as exc:
        log.error("customer_list_failed", error=store_error_message(exc))
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=store_error_message(exc)
        ) from exc
    return [CustomerResponse.model_validate(c) for c in customers]


@router.post("", response_model=CustomerResponse, status_code=HTTP_201_CREATED)
async def create_customer(
    body: CustomerCreateRequest,
    session: AsyncSession = Depends(db_session),
) -> CustomerResponse:
    try:
        customer = await CustomerRepo(session).create(name=body.name, email=body.email)
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        log.warning("customer_create_rejected", error=store_error_message(exc))
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST, detail=store_error_message(exc)
        ) from exc
    log.info("customer_created", customer_id=customer.id)
    return CustomerResponse.model_validate(customer)


# --- Module Notes -----------------------------------------------------------
# Any other method on /api/customers falls through to Starlette's 405, rendered
# as {"error": ...} by `api.error_handlers`.
