import logging
from typing import Optional
from fastapi import APIRouter, Response, status, Depends
from sqlalchemy.orm import Session
from charity_events.database import get_db
from charity_events.controller.event_controller import (
    add_event_controller,
    delete_event_controller,
    retrieve_event_detail_controller,
    retrieve_home_events_controller,
    search_events_controller,
    update_event_controller,
)
from charity_events.controller.exceptions import (
    EventHasRegistrationsError,
    InvalidFilterError,
    MissingFieldsError,
)
from charity_events.schema.event_schema import EventPayload
from charity_events.response_model import MessageResponseModel, ErrorResponseModel

logger = logging.getLogger(__name__)

router = APIRouter()


# ------------------ Retrieve Home Events ------------------
@router.get("/home", response_description="Active events from today onwards")
async def get_home_events(response: Response, db: Session = Depends(get_db)):
    try:
        return await retrieve_home_events_controller(db)
    except Exception:
        logger.exception("Homepage API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Internal server error")


# ----------------------- SEARCH Events -----------------------
@router.get("/search", response_description="Active events matching the filters")
async def search_events(
    response: Response,
    date: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db),
):
    try:
        return await search_events_controller(db, date, location, category)
    except InvalidFilterError as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ErrorResponseModel(str(e))
    except Exception:
        logger.exception("Search API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Internal server error")


# ------------------ Retrieve Event Detail ------------------
@router.get("/{event_id}", response_description="Event with its registrations")
async def get_event(response: Response, event_id: int, db: Session = Depends(get_db)):
    try:
        event = await retrieve_event_detail_controller(db, event_id)
    except Exception:
        logger.exception("Event details API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Internal server error")

    if event is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return ErrorResponseModel("Event not found")
    return event


# ----------------------- ADD Event -----------------------
@router.post("", status_code=status.HTTP_201_CREATED, response_description="Create a new event")
async def add_event(response: Response, payload: EventPayload, db: Session = Depends(get_db)):
    try:
        event_id = await add_event_controller(db, payload.model_dump(exclude_unset=True))
    except MissingFieldsError as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ErrorResponseModel("Missing required fields", fields=e.fields)
    except Exception:
        db.rollback()
        logger.exception("Create event error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Failed to create event")

    return MessageResponseModel("Event created", event_id=event_id)


# ------------------ Update Event ------------------
@router.put("/{event_id}", response_description="Replace an event")
async def update_event(response: Response, event_id: int, payload: EventPayload, db: Session = Depends(get_db)):
    try:
        updated = await update_event_controller(db, event_id, payload.model_dump(exclude_unset=True))
    except MissingFieldsError as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ErrorResponseModel("Missing required fields", fields=e.fields)
    except Exception:
        db.rollback()
        logger.exception("Update event error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Failed to update event")

    if updated is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return ErrorResponseModel("Event not found")
    return MessageResponseModel("Event updated successfully")


# ------------------ Delete Event ------------------
@router.delete("/{event_id}", response_description="Delete an event without registrations")
async def delete_event(response: Response, event_id: int, db: Session = Depends(get_db)):
    try:
        deleted = await delete_event_controller(db, event_id)
    except EventHasRegistrationsError:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ErrorResponseModel("Cannot delete event with existing registrations")
    except Exception:
        db.rollback()
        logger.exception("Delete event error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Failed to delete event")

    if deleted is None:
        response.status_code = status.HTTP_404_NOT_FOUND
        return ErrorResponseModel("Event not found")
    return MessageResponseModel("Event deleted successfully")


__all__ = ["router"]
