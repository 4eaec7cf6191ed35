"""
Customer endpoints.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_master_data
from src.application.dto.requests import CustomerRequest
from src.application.dto.responses import CustomerListResponse, CustomerResponse, ErrorResponse
from src.core.services import MasterDataService

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    service: MasterDataService = Depends(get_master_data),
) -> CustomerListResponse:
    customers = await service.list_customers()
    return CustomerListResponse(
        customers=[CustomerResponse.from_entity(c) for c in customers],
        total=len(customers),
    )


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerRequest,
    service: MasterDataService = Depends(get_master_data),
) -> CustomerResponse:
    """Save a customer for reuse on invoices."""
    customer = await service.create_customer(request.to_entity())
    return CustomerResponse.from_entity(customer)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_customer(
    customer_id: int,
    service: MasterDataService = Depends(get_master_data),
) -> CustomerResponse:
    return CustomerResponse.from_entity(await service.get_customer(customer_id))


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_customer(
    customer_id: int,
    request: CustomerRequest,
    service: MasterDataService = Depends(get_master_data),
) -> CustomerResponse:
    """
    Replace a customer's details.

    Invoices already saved keep the customer snapshot they were created with.
    """
    customer = await service.update_customer(customer_id, request.to_entity())
    return CustomerResponse.from_entity(customer)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_customer(
    customer_id: int,
    service: MasterDataService = Depends(get_master_data),
) -> None:
    await service.delete_customer(customer_id)
