"""Life domain CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import (
    LifeDomainCreate,
    LifeDomainResponse,
    LifeDomainUpdate,
)
from aion.application.services import LifeDomainService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_life_domain_service
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/life-domains", tags=["Life Domains"])


@router.get("", response_model=list[LifeDomainResponse])
async def list_life_domains(
    user_id: UserIdQuery,
    service: LifeDomainService = Depends(get_life_domain_service),
) -> list[LifeDomainResponse]:
    """A user's life domains in creation order."""
    domains = await service.list_for_user(user_id)
    return [LifeDomainResponse.model_validate(d, from_attributes=True) for d in domains]


@router.get("/{domain_id}", response_model=LifeDomainResponse)
async def get_life_domain(
    domain_id: int,
    service: LifeDomainService = Depends(get_life_domain_service),
) -> LifeDomainResponse:
    try:
        domain = await service.get(domain_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LifeDomainResponse.model_validate(domain, from_attributes=True)


@router.post("", response_model=LifeDomainResponse, status_code=status.HTTP_201_CREATED)
async def create_life_domain(
    data: LifeDomainCreate,
    service: LifeDomainService = Depends(get_life_domain_service),
) -> LifeDomainResponse:
    domain = await service.create(data)
    return LifeDomainResponse.model_validate(domain, from_attributes=True)


@router.put("/{domain_id}", response_model=LifeDomainResponse)
async def update_life_domain(
    domain_id: int,
    data: LifeDomainUpdate,
    service: LifeDomainService = Depends(get_life_domain_service),
) -> LifeDomainResponse:
    """Apply the fields sent; the rest stay as they are."""
    try:
        domain = await service.update(domain_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LifeDomainResponse.model_validate(domain, from_attributes=True)


@router.delete("/{domain_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_life_domain(
    domain_id: int,
    service: LifeDomainService = Depends(get_life_domain_service),
) -> None:
    try:
        await service.delete(domain_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
