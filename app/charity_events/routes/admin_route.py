import logging
from fastapi import APIRouter, Response, status, Depends
from sqlalchemy.orm import Session
from charity_events.database import get_db
from charity_events.controller.event_controller import retrieve_admin_events_controller
from charity_events.response_model import ErrorResponseModel

logger = logging.getLogger(__name__)

router = APIRouter()


# ------------------ Retrieve ALL Events (incl. inactive) ------------------
@router.get("/events", response_description="All events, active or not")
async def get_admin_events(response: Response, db: Session = Depends(get_db)):
    try:
        return await retrieve_admin_events_controller(db)
    except Exception:
        logger.exception("Admin events API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Internal server error")


__all__ = ["router"]
