"""Customer API routes — every route requires a token, deletes require admin."""

from typing import List

from fastapi import APIRouter, Depends

from rental_api.application.services.customer_service import (
    create_customer,
    delete_customer,
    get_customer,
    list_customers,
    update_customer,
)
from rental_api.domain.models.customer import Customer
from rental_api.domain.repositories.base import BaseRepository
from rental_api.domain.schemas.auth import TokenIdentity
from rental_api.domain.schemas.customer import CustomerRead, CustomerWrite
from rental_api.interfaces.api.deps import get_current_user, object_id_or_404, require_admin
from rental_api.interfaces.deps import get_customer_repository

router = APIRouter(prefix="/api/customers", tags=["Customers"])


@router.get("", response_model=List[CustomerRead])
def customers_index(
    repo: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return [customer.to_document() for customer in list_customers(repo)]


@router.get("/{customer_id}", response_model=CustomerRead)
def customer_detail(
    customer_id: str,
    repo: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return get_customer(repo, object_id_or_404(customer_id)).to_document()


@router.post("", response_model=CustomerRead)
def customer_create(
    body: CustomerWrite,
    repo: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return create_customer(repo, body).to_document()


@router.put("/{customer_id}", response_model=CustomerRead)
def customer_update(
    customer_id: str,
    body: CustomerWrite,
    repo: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(get_current_user),
):
    return update_customer(repo, object_id_or_404(customer_id), body).to_document()


@router.delete("/{customer_id}", response_model=CustomerRead)
def customer_delete(
    customer_id: str,
    repo: BaseRepository[Customer] = Depends(get_customer_repository),
    user: TokenIdentity = Depends(require_admin),
):
    return delete_customer(repo, object_id_or_404(customer_id)).to_document()
