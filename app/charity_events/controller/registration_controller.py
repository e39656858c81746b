import logging
from sqlalchemy.orm import Session
from charity_events.models.registration_model import Registration
from charity_events.controller.exceptions import MissingFieldsError, missing_fields

logger = logging.getLogger(__name__)

REQUIRED_REGISTRATION_FIELDS = ("event_id", "full_name", "email", "phone", "ticket_count")


# ------------------ Add New Registration ------------------
async def add_registration_controller(db: Session, registration_data: dict):
    """Insert a registration and return its store-assigned id.

    The referenced event is not looked up first; a dangling ``event_id`` is
    left for the store's foreign key to reject.
    """
    missing = missing_fields(registration_data, REQUIRED_REGISTRATION_FIELDS)
    if missing:
        raise MissingFieldsError(missing)

    new_registration = Registration(
        **{field: registration_data[field] for field in REQUIRED_REGISTRATION_FIELDS}
    )
    db.add(new_registration)
    db.commit()
    db.refresh(new_registration)

    logger.info(
        "Registration %s created for event %s (%s tickets)",
        new_registration.id,
        new_registration.event_id,
        new_registration.ticket_count,
    )
    return new_registration.id
