"""Reaction routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from confess.application.usecase.confession import ConfessionItem
from confess.application.usecase.reaction import (
    ReactToConfessionRequest,
    ReactToConfessionUseCase,
)
from confess.domain.error import (
    DuplicateReactionError,
    InvalidReactionError,
    NotFoundError,
    ValidationError,
)
from confess.persistence.error import StorageError

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a confession."""

    model_config = ConfigDict(populate_by_name=True)

    # Untyped so that null, numbers or lists reach the domain checks and
    # come back as 400 instead of a 422 parse error
    reaction_type: Any = Field(default=None, alias="reactionType")
    user_id: Any = Field(default=None, alias="userId")


@router.post("/confessions/{confession_id}/reactions", response_model=ConfessionItem)
async def react_to_confession(
    confession_id: str,
    request: ReactAPIRequest,
    react_use_case: FromDishka[ReactToConfessionUseCase],
) -> ConfessionItem:
    """React to a confession.

    Each user can react once per confession with love, sad or laugh.

    Args:
        confession_id: Confession UUID
        request: Reaction type and reacting user
        react_use_case: React to confession use case from DI

    Returns:
        The confession with its updated reactions

    Raises:
        HTTPException: 404 if the confession is missing, 400 for an invalid
            reaction type, a repeated reaction or a missing user ID, 500 on
            storage failure
    """
    try:
        return await react_use_case.execute(
            ReactToConfessionRequest(
                confession_id=confession_id,
                reaction_type=request.reaction_type,
                user_id=request.user_id,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Confession not found",
        )
    except InvalidReactionError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid reaction type",
        )
    except DuplicateReactionError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User has already reacted",
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error(
            "Error updating reaction", confession_id=confession_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating reaction",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error updating reaction",
            confession_id=confession_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating reaction",
        )
