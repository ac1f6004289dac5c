"""Contact form routes: show the form, accept submissions, list contacts."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from loguru import logger
from starlette.responses import Response

from src.contact_form.api.http.deps import get_contact_store
from src.contact_form.api.http.templating import templates
from src.contact_form.core.errors import ContactValidationError, StorageError
from src.contact_form.core.services import ContactStore
from src.contact_form.core.validation import validate_contact

router = APIRouter(tags=["contacts"])

SAVED_MESSAGE = "Contact saved successfully"
SAVE_FAILED_MESSAGE = "Failed to save contact."
LIST_FAILED_MESSAGE = "Failed to load contacts."


async def read_submission(request: Request) -> Any:
    """Parse the request body as JSON or form data, based on Content-Type.

    A JSON body that cannot be decoded is treated as an empty record so it
    fails validation like any other incomplete submission.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";", 1)[0].strip().lower() == "application/json":
        try:
            return await request.json()
        except ValueError:
            logger.info("Discarding undecodable JSON body")
            return {}

    form = await request.form()
    return dict(form)


@router.get("/", response_class=HTMLResponse)
async def show_form(request: Request) -> Response:
    """Render the empty contact form."""
    return templates.TemplateResponse(request, "index.html", {"errors": [], "values": {}})


@router.post("/", response_class=PlainTextResponse)
async def submit_contact(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> Response:
    """Validate a submission and store it.

    400 with the joined field messages when validation fails, 500 with a
    generic message when the store fails.
    """
    payload = await read_submission(request)

    try:
        contact = validate_contact(payload)
    except ContactValidationError as exc:
        logger.info("Contact submission rejected", errors=exc.messages)
        return PlainTextResponse("; ".join(exc.messages), status_code=400)

    try:
        await store.create(contact)
    except StorageError:
        logger.exception("Failed to save contact")
        return PlainTextResponse(SAVE_FAILED_MESSAGE, status_code=500)

    return PlainTextResponse(SAVED_MESSAGE)


@router.get("/contacts", response_class=HTMLResponse)
async def list_contacts(
    request: Request,
    store: ContactStore = Depends(get_contact_store),
) -> Response:
    """Render every stored contact."""
    try:
        contacts = await store.find_all()
    except StorageError:
        logger.exception("Failed to load contacts")
        return PlainTextResponse(LIST_FAILED_MESSAGE, status_code=500)

    return templates.TemplateResponse(request, "contacts.html", {"contacts": contacts})
