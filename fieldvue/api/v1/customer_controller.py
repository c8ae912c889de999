# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.customer_dto import (
    CustomerCreateRequest,
    CustomerListResponse,
    CustomerResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.customer import CreateCustomerUseCase, ListCustomersUseCase
from ...di.container import get_container
from .dependencies import get_current_user, to_http_exception


router = APIRouter(tags=["customers"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CustomerResponse:
    container = get_container()
    create_customer_use_case = container.get(CreateCustomerUseCase)

    try:
        return await create_customer_use_case.execute(request, current_user)
    except ValueError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=CustomerListResponse)
async def list_customers(current_user: UserResponse = Depends(get_current_user)) -> CustomerListResponse:
    container = get_container()
    list_customers_use_case = container.get(ListCustomersUseCase)
    return await list_customers_use_case.execute(current_user)
