"""
Collection routers: one CRUD router per resource of the active family.

Routes are generated from the resource table, so every resource answers with
the same status codes and bodies:

- list / get → 200 with the document(s)
- create → 201 with {"_id": ...}
- update / delete → 200 with {"status": ...}
- missing document → 404 with {"status": ...}
- anything else → 500 with {"error": ...} (see the handlers in app.main)
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.connections import get_database
from app.database.resource import Operation, Resource
from app.exceptions import DocumentNotFound
from app.schemas.common import CreatedResponse, ErrorResponse, StatusResponse
from app.services.collection_gateway import CollectionGateway

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Store or identifier error"}}
NOT_FOUND_RESPONSES = {
    404: {"model": StatusResponse, "description": "No document with this id"},
    **ERROR_RESPONSES,
}


def build_router(resource: Resource) -> APIRouter:
    """Create the /api/{plural} router exposing the resource's enabled operations."""
    router = APIRouter(prefix=f"/api/{resource.plural}", tags=[resource.plural.capitalize()])

    async def get_gateway(
        db: Optional[AsyncIOMotorDatabase] = Depends(get_database),
    ) -> CollectionGateway:
        """Dependency to get a gateway bound to this resource's collection."""
        return CollectionGateway(db, resource)

    if resource.supports(Operation.LIST):

        @router.get(
            "",
            response_model=list[resource.model],
            summary=f"List {resource.plural}",
            responses=ERROR_RESPONSES,
        )
        async def list_documents(gateway: CollectionGateway = Depends(get_gateway)):
            return await gateway.list_all()

    if resource.supports(Operation.GET):

        @router.get(
            "/{document_id}",
            response_model=resource.model,
            summary=f"Get a {resource.name} by id",
            responses=NOT_FOUND_RESPONSES,
        )
        async def get_document(
            document_id: str,
            gateway: CollectionGateway = Depends(get_gateway),
        ):
            return await gateway.get_by_id(document_id)

    if resource.supports(Operation.CREATE):

        @router.post(
            "",
            response_model=CreatedResponse,
            status_code=status.HTTP_201_CREATED,
            summary=f"Create a {resource.name}",
            description=f"Only these fields are stored: {', '.join(resource.create_fields)}.",
            responses=ERROR_RESPONSES,
        )
        async def create_document(
            body: Optional[dict[str, Any]] = Body(None),
            gateway: CollectionGateway = Depends(get_gateway),
        ):
            document_id = await gateway.create(body or {})
            return CreatedResponse(_id=document_id)

    if resource.supports(Operation.UPDATE):

        @router.put(
            "/{document_id}",
            response_model=StatusResponse,
            summary=f"Update a {resource.name}",
            description="Merges every field of the body except _id into the document.",
            responses=NOT_FOUND_RESPONSES,
        )
        async def update_document(
            document_id: str,
            body: Optional[dict[str, Any]] = Body(None),
            gateway: CollectionGateway = Depends(get_gateway),
        ):
            try:
                await gateway.update_by_id(document_id, body or {})
            except DocumentNotFound:
                return JSONResponse(
                    status_code=status.HTTP_404_NOT_FOUND,
                    content={"status": f"No {resource.name} with id {document_id}"},
                )
            return StatusResponse(status=f"{resource.label} with id {document_id} has been updated.")

    if resource.supports(Operation.DELETE):

        @router.delete(
            "/{document_id}",
            response_model=StatusResponse,
            summary=f"Delete a {resource.name}",
            responses=NOT_FOUND_RESPONSES,
        )
        async def delete_document(
            document_id: str,
            gateway: CollectionGateway = Depends(get_gateway),
        ):
            await gateway.delete_by_id(document_id)
            return StatusResponse(
                status=f"Object with id {document_id} has been successfully deleted."
            )

    return router
