class MissingFieldsError(Exception):
    """Raised when a request body lacks one or more required fields."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InvalidFilterError(Exception):
    """Raised when a search filter value cannot be interpreted."""


class EventHasRegistrationsError(Exception):
    """Raised when deleting an event that still has registrations."""

    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(f"Event {event_id} has existing registrations")


def missing_fields(data: dict, required) -> list:
    # Presence check: absent, null or "" is missing, 0 and False are present
    return [field for field in required if data.get(field) is None or data.get(field) == ""]
