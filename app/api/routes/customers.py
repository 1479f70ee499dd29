"""Customer Routes — CRUD endpoints under /rest/customers.

Invariants:
    - Empty collection answers 204 with no body, never 200 with []
    - Create validates first (422), then checks for a duplicate (409), then persists (201)
    - 201 carries a Location header and no body; 409 carries no body
    - Update and delete load by id first; a miss is turned into a 404 here, explicitly
    - Update overwrites first name, last name, date of birth and address from the body;
      the path id wins over any id in the payload

Design Decisions:
    - Routes hold request/response translation only; storage goes through CustomerService
    - Validator injected as a dependency so tests can swap the rule set
"""

import logging

from fastapi import APIRouter, Depends, Header, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.media import render
from app.core.domain_types import CustomerId
from app.core.errors import CustomerValidationError, DuplicateCustomerError
from app.core.lookup_result import unwrap_or_raise
from app.core.repository_protocols import CustomerRepository
from app.core.validate_customer import (
    CustomerValidator, Validator, collect_violations,
)
from app.infrastructure.database import get_db
from app.models.customer import Customer
from app.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from app.services.customer_service import CustomerService, apply_customer_update

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/rest/customers", tags=["customers"])


def get_customer_service(db: AsyncSession = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_customer_validator() -> Validator:
    return CustomerValidator()


async def get_customer_or_404(
    customer_id: int, service: CustomerRepository,
) -> Customer:
    """Load a customer or raise EntityNotFoundError (404)."""
    return unwrap_or_raise(await service.get_by_id(CustomerId(customer_id)))


def _to_payload(customer: Customer) -> dict:
    return CustomerResponse.model_validate(customer).model_dump(
        mode="json", by_alias=True,
    )


@router.get("/", response_model=list[CustomerResponse])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
):
    """Retrieve all customers."""
    customers = await service.list()
    if not customers:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return [CustomerResponse.model_validate(c) for c in customers]


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={200: {"content": {"application/xml": {}}}},
)
async def get_customer(
    customer_id: int,
    accept: str | None = Header(None),
    service: CustomerService = Depends(get_customer_service),
):
    """Get customer by id. JSON by default, XML when the client asks for it."""
    logger.info(
        f"Fetching Customer with id {customer_id}",
        extra={"customer_id": customer_id},
    )
    customer = await get_customer_or_404(customer_id, service)
    return render(_to_payload(customer), "customer", accept)


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_customer(
    body: CustomerCreate,
    request: Request,
    service: CustomerService = Depends(get_customer_service),
    validator: Validator = Depends(get_customer_validator),
):
    """Create a customer. 201 + Location on success, no body."""
    violations = collect_violations(validator, body)
    if violations:
        error = CustomerValidationError(violations)
        logger.error(
            f"Detailed Error while processing request: {error}",
            extra={"error_code": error.code},
        )
        raise error

    logger.info(f"Creating Customer: {body.first_name}")
    if await service.exists_by_identity(body):
        error = DuplicateCustomerError(body.first_name)
        logger.error(error.message, extra={"error_code": error.code})
        return Response(status_code=error.http_status)

    customer_id = await service.create(body)
    location = request.url_for("get_customer", customer_id=str(customer_id))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    body: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    """Update name, date of birth and address of an existing customer."""
    logger.info(
        f"Updating Customer {customer_id}", extra={"customer_id": customer_id},
    )
    current = await get_customer_or_404(customer_id, service)
    apply_customer_update(current, body)
    await service.update(current)
    return CustomerResponse.model_validate(current)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
):
    """Delete the customer with the given id. 404 if it does not exist."""
    logger.info(
        f"Fetching & Deleting Customer with id {customer_id}",
        extra={"customer_id": customer_id},
    )
    await get_customer_or_404(customer_id, service)
    await service.delete_by_id(CustomerId(customer_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def remove_all_customers(
    service: CustomerService = Depends(get_customer_service),
):
    """Delete every customer. Always 204."""
    logger.info("Deleting All Customers")
    await service.delete_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
