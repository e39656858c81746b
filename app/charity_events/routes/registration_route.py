import logging
from fastapi import APIRouter, Response, status, Depends
from sqlalchemy.orm import Session
from charity_events.database import get_db
from charity_events.controller.registration_controller import add_registration_controller
from charity_events.controller.exceptions import MissingFieldsError
from charity_events.schema.registration_schema import RegistrationPayload
from charity_events.response_model import MessageResponseModel, ErrorResponseModel

logger = logging.getLogger(__name__)

router = APIRouter()


# ----------------------- Add Registration -----------------------
@router.post("", status_code=status.HTTP_201_CREATED, response_description="Register for an event")
async def add_registration(response: Response, payload: RegistrationPayload, db: Session = Depends(get_db)):
    try:
        registration_id = await add_registration_controller(db, payload.model_dump(exclude_unset=True))
    except MissingFieldsError as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return ErrorResponseModel("Missing required fields", fields=e.fields)
    except Exception:
        db.rollback()
        logger.exception("Registration API error")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ErrorResponseModel("Failed to register")

    return MessageResponseModel("Registration successful", registration_id=registration_id)


__all__ = ["router"]
