"""Contact CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import ContactCreate, ContactResponse, ContactUpdate
from aion.application.services import ContactService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_contact_service
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get("", response_model=list[ContactResponse])
async def list_contacts(
    user_id: UserIdQuery,
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    """A user's contacts in creation order."""
    contacts = await service.list_for_user(user_id)
    return [ContactResponse.model_validate(c, from_attributes=True) for c in contacts]


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    try:
        contact = await service.get(contact_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    data: ContactCreate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    contact = await service.create(data)
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: int,
    data: ContactUpdate,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    try:
        contact = await service.update(contact_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ContactResponse.model_validate(contact, from_attributes=True)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> None:
    try:
        await service.delete(contact_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
