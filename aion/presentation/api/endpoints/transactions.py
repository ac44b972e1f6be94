"""Transaction endpoints. Transactions are append-only."""

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import TransactionCreate, TransactionResponse
from aion.application.services import TransactionService
from aion.domain.exceptions import EntityNotFoundError
from aion.infrastructure.dependencies import get_transaction_service
from aion.presentation.api.params import (
    EndDateQuery,
    StartDateQuery,
    UserIdQuery,
    utc_or_none,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    user_id: UserIdQuery,
    start_date: StartDateQuery = None,
    end_date: EndDateQuery = None,
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    """A user's transactions within the optional range, newest first."""
    transactions = await service.list_for_user(
        user_id, start=utc_or_none(start_date), end=utc_or_none(end_date)
    )
    return [
        TransactionResponse.model_validate(t, from_attributes=True) for t in transactions
    ]


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    try:
        transaction = await service.get(transaction_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TransactionResponse.model_validate(transaction, from_attributes=True)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    data: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await service.create(data)
    return TransactionResponse.model_validate(transaction, from_attributes=True)
