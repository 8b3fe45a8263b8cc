"""
Router factory for the soft-deleted resource collections.

Every collection exposes the same five endpoints; this module builds them from
a service class and a pair of schemas. Annotations here must stay evaluated
(no postponed annotations) because FastAPI reads them from the closures.
"""
from typing import List, Type

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.deps import get_current_user, get_session
from anything_api.services.collections import CollectionService


# PUBLIC_INTERFACE
def build_collection_router(
    *,
    prefix: str,
    tag: str,
    service_class: Type[CollectionService],
    write_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    noun: str,
) -> APIRouter:
    """
    Build list/get/create/update/delete endpoints under `prefix`.

    All endpoints require an authenticated user. Soft-deleted rows are
    invisible: get, update and delete answer 404 for them.
    """
    router = APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(get_current_user)])
    plural = f"{noun}s" if not noun.endswith("x") else f"{noun}es"

    @router.get(
        "",
        response_model=List[read_schema],
        summary=f"List {plural}",
        description=f"Return every {noun} that has not been deleted, ordered by id.",
    )
    async def list_rows(session: AsyncSession = Depends(get_session)):
        rows = await service_class(session).list_active()
        return [read_schema.model_validate(r) for r in rows]

    @router.get(
        "/{row_id}",
        response_model=read_schema,
        summary=f"Get {noun}",
        responses={404: {"description": f"{noun.capitalize()} missing or deleted"}},
    )
    async def get_row(
        row_id: int = Path(..., description="Identifier"),
        session: AsyncSession = Depends(get_session),
    ):
        row = await service_class(session).get(row_id)
        return read_schema.model_validate(row)

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {noun}",
        responses={400: {"description": "Validation failed or invalid reference"}},
    )
    async def create_row(
        payload: write_schema,  # type: ignore[valid-type]
        response: Response,
        session: AsyncSession = Depends(get_session),
    ):
        row = await service_class(session).create(payload)
        response.headers["Location"] = f"{prefix}/{row.id}"
        return read_schema.model_validate(row)

    @router.put(
        "/{row_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Update {noun}",
        responses={404: {"description": f"{noun.capitalize()} missing or deleted"}},
    )
    async def update_row(
        payload: write_schema,  # type: ignore[valid-type]
        row_id: int = Path(..., description="Identifier"),
        session: AsyncSession = Depends(get_session),
    ) -> Response:
        await service_class(session).update(row_id, payload)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{row_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete {noun}",
        description=f"Soft-delete the {noun} by stamping deleted_on.",
        responses={404: {"description": f"{noun.capitalize()} missing or deleted"}},
    )
    async def delete_row(
        row_id: int = Path(..., description="Identifier"),
        session: AsyncSession = Depends(get_session),
    ) -> Response:
        await service_class(session).delete(row_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
