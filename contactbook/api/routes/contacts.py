"""Contacts API endpoints."""

import logging

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse

from contactbook.api.deps import ContactServiceDep, CurrentUser
from contactbook.api.schemas.contact import (
    ContactResponse,
    ContactsListResponse,
    ContactValidationErrorResponse,
)
from contactbook.domain.attributes import ContactAttributes
from contactbook.domain.services.contact_service import ContactResult

logger = logging.getLogger(__name__)

router = APIRouter()

_VALIDATION_RESPONSES = {
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ContactValidationErrorResponse},
}


def _rejected(result: ContactResult) -> JSONResponse:
    """422 carrying the failures and the attempted contact."""
    body = ContactValidationErrorResponse.from_result(result)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(mode="json"),
    )


def _saved(result: ContactResult, request: Request, response: Response) -> ContactResponse:
    response.headers["Location"] = str(request.url_for("get_contact", contact_id=result.contact.id))
    return ContactResponse.model_validate(result.contact)


@router.get("", response_model=ContactsListResponse)
async def list_contacts(
    contact_service: ContactServiceDep,
    letter: str | None = Query(None, max_length=255),
) -> ContactsListResponse:
    """List contacts, optionally only those whose lastname starts with letter."""
    if letter is not None:
        contacts = await contact_service.by_letter(letter)
    else:
        contacts = await contact_service.list_all()

    return ContactsListResponse(
        contacts=[ContactResponse.model_validate(contact) for contact in contacts],
        total=len(contacts),
    )


@router.get("/new", response_model=ContactResponse)
async def new_contact(
    contact_service: ContactServiceDep,
    current_user: CurrentUser,
) -> ContactResponse:
    """Blank contact template with home, office and mobile phone slots."""
    return ContactResponse.model_validate(contact_service.build_new())


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: int,
    contact_service: ContactServiceDep,
) -> ContactResponse:
    """Get a specific contact by ID."""
    contact = await contact_service.find(contact_id)
    return ContactResponse.model_validate(contact)


@router.get("/{contact_id}/edit", response_model=ContactResponse)
async def edit_contact(
    contact_id: int,
    contact_service: ContactServiceDep,
    current_user: CurrentUser,
) -> ContactResponse:
    """Get a contact for editing."""
    contact = await contact_service.find(contact_id)
    return ContactResponse.model_validate(contact)


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_VALIDATION_RESPONSES,
)
async def create_contact(
    attrs: ContactAttributes,
    request: Request,
    response: Response,
    contact_service: ContactServiceDep,
    current_user: CurrentUser,
):
    """Create a contact with its phones."""
    result = await contact_service.create(attrs)
    if not result.ok:
        return _rejected(result)
    logger.info(f"Contact {result.contact.id} created by user_id={current_user.id}")
    return _saved(result, request, response)


@router.api_route(
    "/{contact_id}",
    methods=["PATCH", "PUT"],
    response_model=ContactResponse,
    responses=_VALIDATION_RESPONSES,
)
async def update_contact(
    contact_id: int,
    attrs: ContactAttributes,
    request: Request,
    response: Response,
    contact_service: ContactServiceDep,
    current_user: CurrentUser,
):
    """Update a contact. Omitted fields are left unchanged."""
    result = await contact_service.update(contact_id, attrs)
    if not result.ok:
        return _rejected(result)
    logger.info(f"Contact {contact_id} updated by user_id={current_user.id}")
    return _saved(result, request, response)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: int,
    contact_service: ContactServiceDep,
    current_user: CurrentUser,
) -> Response:
    """Delete a contact and its phones."""
    await contact_service.destroy(contact_id)
    logger.info(f"Contact {contact_id} deleted by user_id={current_user.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
