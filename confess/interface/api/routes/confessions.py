"""Confession routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from confess.application.usecase.confession import (
    ConfessionItem,
    CreateConfessionRequest,
    CreateConfessionResponse,
    CreateConfessionUseCase,
    ListConfessionsByTagRequest,
    ListConfessionsByTagUseCase,
    ListRandomConfessionsResponse,
    ListRandomConfessionsUseCase,
)
from confess.domain.error import ValidationError
from confess.persistence.error import StorageError

router = APIRouter(tags=["confessions"], route_class=DishkaRoute)


class CreateConfessionAPIRequest(BaseModel):
    """API request for creating a confession.

    Fields are optional here so that a missing title or body is reported
    by the domain as a validation error. A null tag list means no tags.
    """

    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None


@router.post(
    "/confessions",
    response_model=CreateConfessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_confession(
    request: CreateConfessionAPIRequest,
    create_confession_use_case: FromDishka[CreateConfessionUseCase],
) -> CreateConfessionResponse:
    """Create a new confession.

    Args:
        request: Confession creation data
        create_confession_use_case: Create confession use case from DI

    Returns:
        Success message and the new confession ID

    Raises:
        HTTPException: 400 on missing title/body, 500 on storage failure
    """
    try:
        return await create_confession_use_case.execute(
            CreateConfessionRequest(
                title=request.title,
                body=request.body,
                tags=request.tags or [],
            )
        )
    except ValidationError as e:
        logfire.warn("Confession creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageError as e:
        logfire.error("Error creating confession", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating confession",
        )
    except Exception as e:
        logfire.error("Unexpected error creating confession", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating confession",
        )


@router.get("/api/confessions/random", response_model=ListRandomConfessionsResponse)
async def list_random_confessions(
    list_random_confessions_use_case: FromDishka[ListRandomConfessionsUseCase],
) -> ListRandomConfessionsResponse:
    """Get a handful of confessions picked at random.

    Args:
        list_random_confessions_use_case: Use case from DI

    Returns:
        Up to five confessions in no particular order
    """
    try:
        return await list_random_confessions_use_case.execute()
    except Exception as e:
        logfire.error("Error fetching random confessions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching confessions",
        )


@router.get("/api/confessions/tag/{tag}", response_model=list[ConfessionItem])
async def list_confessions_by_tag(
    tag: str,
    list_confessions_by_tag_use_case: FromDishka[ListConfessionsByTagUseCase],
) -> list[ConfessionItem]:
    """Get every confession carrying a tag.

    Args:
        tag: Tag label to filter on
        list_confessions_by_tag_use_case: Use case from DI

    Returns:
        Matching confessions (possibly empty)
    """
    try:
        result = await list_confessions_by_tag_use_case.execute(
            ListConfessionsByTagRequest(tag=tag)
        )
        return result.confessions
    except Exception as e:
        logfire.error("Error fetching confessions by tag", tag=tag, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )
