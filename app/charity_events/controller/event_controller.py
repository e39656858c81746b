import logging
from datetime import date, datetime
from sqlalchemy import and_
from sqlalchemy.orm import Session
from charity_events.models.event_model import Event, EVENT_FIELDS
from charity_events.models.category_model import Category
from charity_events.models.organization_model import Organization
from charity_events.models.registration_model import Registration
from charity_events.controller.exceptions import (
    EventHasRegistrationsError,
    InvalidFilterError,
    MissingFieldsError,
    missing_fields,
)
from charity_events.response_model import model_to_dict

logger = logging.getLogger(__name__)

REQUIRED_EVENT_FIELDS = ("title", "event_date", "location", "category_id", "organization_id")

# Defaults applied when an optional field is absent or null; anything else absent becomes null
EVENT_FIELD_DEFAULTS = {
    "current_progress": 0,
    "is_active": True,
}


# ------------------ Shared listing query ------------------
def _event_listing_query(db: Session):
    return (
        db.query(
            Event,
            Category.name.label("category_name"),
            Organization.name.label("organization_name"),
        )
        .outerjoin(Category, Event.category_id == Category.id)
        .outerjoin(Organization, Event.organization_id == Organization.id)
    )


def _serialize_event_row(row):
    event, category_name, organization_name = row
    data = model_to_dict(event)
    data["category_name"] = category_name
    data["organization_name"] = organization_name
    return data


# ------------------ Search filter builder ------------------
def build_search_filters(date_value: str = None, location: str = None, category: str = None):
    """Translate optional search inputs into SQLAlchemy filter clauses.

    The active-flag clause is always first. Each non-empty input adds one
    more clause, in the order date, location, category. Values are only ever
    bound as parameters.
    """
    clauses = [Event.is_active.is_(True)]

    if date_value:
        try:
            parsed_date = datetime.strptime(date_value, "%Y-%m-%d").date()
        except ValueError:
            raise InvalidFilterError("Invalid date format, expected YYYY-MM-DD")
        clauses.append(Event.event_date == parsed_date)

    if location:
        clauses.append(Event.location.ilike(f"%{location}%"))

    if category:
        clauses.append(Category.name == category)

    return clauses


# ------------------ Retrieve Home Events ------------------
async def retrieve_home_events_controller(db: Session, today: date = None):
    today = today or date.today()
    rows = (
        _event_listing_query(db)
        .filter(Event.is_active.is_(True), Event.event_date >= today)
        .order_by(Event.event_date.asc())
        .all()
    )
    return [_serialize_event_row(row) for row in rows]


# ------------------ Search Events ------------------
async def search_events_controller(db: Session, date_value: str = None, location: str = None, category: str = None):
    clauses = build_search_filters(date_value, location, category)
    rows = (
        _event_listing_query(db)
        .filter(and_(*clauses))
        .order_by(Event.event_date.asc())
        .all()
    )
    return [_serialize_event_row(row) for row in rows]


# ------------------ Retrieve ALL Events (admin) ------------------
async def retrieve_admin_events_controller(db: Session):
    rows = _event_listing_query(db).order_by(Event.event_date.asc()).all()
    return [_serialize_event_row(row) for row in rows]


# ------------------ Retrieve Event Detail ------------------
async def retrieve_event_detail_controller(db: Session, event_id: int):
    row = _event_listing_query(db).filter(Event.id == event_id).first()
    if not row:
        return None

    registrations = (
        db.query(
            Registration.id,
            Registration.full_name,
            Registration.email,
            Registration.phone,
            Registration.ticket_count,
            Registration.registration_date,
        )
        .filter(Registration.event_id == event_id)
        .order_by(Registration.registration_date.desc())
        .all()
    )

    event = _serialize_event_row(row)
    event["registrations"] = [dict(registration._mapping) for registration in registrations]
    return event


# ------------------ Validation & defaults ------------------
def validate_event_data(event_data: dict):
    missing = missing_fields(event_data, REQUIRED_EVENT_FIELDS)
    if missing:
        raise MissingFieldsError(missing)


def build_event_values(event_data: dict):
    """Full set of column values for an insert or a full-replace update."""
    values = {}
    for field in EVENT_FIELDS:
        value = event_data.get(field)
        if value is None:
            value = EVENT_FIELD_DEFAULTS.get(field)
        values[field] = value
    return values


# ------------------ Add New Event ------------------
async def add_event_controller(db: Session, event_data: dict):
    validate_event_data(event_data)

    new_event = Event(**build_event_values(event_data))
    db.add(new_event)
    db.commit()
    db.refresh(new_event)

    logger.info("Event %s created: %s", new_event.id, new_event.title)
    return new_event.id


# ------------------ Update Event ------------------
async def update_event_controller(db: Session, event_id: int, event_data: dict):
    validate_event_data(event_data)

    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        return None

    for key, val in build_event_values(event_data).items():
        setattr(event, key, val)

    db.commit()
    logger.info("Event %s updated", event_id)
    return event_id


# ------------------ Delete Event ------------------
async def delete_event_controller(db: Session, event_id: int):
    # Check-then-delete; a registration inserted between the two statements is not guarded against
    registration = (
        db.query(Registration.id)
        .filter(Registration.event_id == event_id)
        .first()
    )
    if registration:
        raise EventHasRegistrationsError(event_id)

    deleted = (
        db.query(Event)
        .filter(Event.id == event_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    if not deleted:
        return None

    logger.info("Event %s deleted", event_id)
    return event_id
