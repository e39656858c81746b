import logging
from fastapi import APIRouter, Response, status, Depends
from sqlalchemy.orm import Session
from charity_events.database import get_db
from charity_events.controller.category_controller import retrieve_categories_controller
from charity_events.response_model import ErrorResponseModel

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_description="All categories by name")
async def get_categories(response: Response, db: Session = Depends(get_db)):
    try:
        return await retrieve_categories_controller(db)
    except Exception:
        logger.exception("Categories API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Internal server error")


__all__ = ["router"]
