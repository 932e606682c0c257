"""
FastAPI app: the record form page plus a small JSON API.
Run with uvicorn: uvicorn web.main:create_app --factory --reload  (or python -m web)
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from contactbook.application import RecordCollection
from contactbook.domain import (
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
    Record,
)
from contactbook.infrastructure import InMemoryRecordCollection, load_seed
from web.config import Settings, load_settings
from web.controller import RecordController

logger = logging.getLogger(__name__)


class RecordItem(BaseModel):
    id: str
    name: str
    address: str
    telephone: str
    email: str
    contacts: list[str]


def _to_item(record: Record) -> RecordItem:
    return RecordItem(**record.to_fields())


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def get_controller(request: Request) -> RecordController:
    return request.app.state.controller


def create_app(
    collection: RecordCollection | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app around one collection. Without one, the configured seed is loaded."""
    if collection is None:
        settings = settings or load_settings()
        seed = load_seed(settings.seed_path)
        logger.info("Seeding %d records from %s", len(seed), settings.seed_path)
        collection = InMemoryRecordCollection(seed)

    app = FastAPI(title="Contactbook")
    app.state.controller = RecordController(collection)
    # Every route is async and the controller never awaits, so each controller
    # call runs to completion on the event loop before the next one starts.

    # --- REST: health ---

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # --- HTML: form + list ---

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        return HTMLResponse(get_controller(request).page())

    @app.post("/records")
    async def submit_record(request: Request):
        form_data = await request.form()
        controller = get_controller(request)
        try:
            controller.submit(form_data)
        except NotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e)) from e
        except (InvalidArgumentError, InvalidInputError) as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        return _redirect_home()

    @app.post("/records/{record_id}/edit")
    async def edit_record(record_id: str, request: Request):
        if get_controller(request).edit(record_id) is None:
            raise HTTPException(status_code=404, detail="Record not found")
        return _redirect_home()

    @app.post("/records/{record_id}/delete")
    async def delete_record(record_id: str, request: Request):
        get_controller(request).delete(record_id)
        return _redirect_home()

    # --- REST: records ---

    @app.get("/api/records")
    async def list_records(request: Request) -> list[RecordItem]:
        return [_to_item(r) for r in get_controller(request).collection.get_all()]

    @app.get("/api/records/{record_id}")
    async def get_record(record_id: str, request: Request) -> RecordItem:
        record = get_controller(request).collection.get_by_id(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Record not found")
        return _to_item(record)

    return app
