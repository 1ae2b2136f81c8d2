from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict

# Stay dates are stored as midnight datetimes and returned as plain dates
DATE_FIELDS = ("start_date", "end_date")


class BookingCreate(BaseModel):
    # Every field is optional here so that missing values reach the
    # validation sequence and get a 400 instead of a 422.
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None
    address: Optional[str] = None
    message: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class BookingCreated(BaseModel):
    insertedId: str


class BookingList(BaseModel):
    bookings: List[Dict[str, Any]]


def serialize_booking(doc: dict) -> dict:
    """
    Render a stored document as JSON-ready data.
    The collection has no enforced schema, so unknown or legacy fields
    (e.g. createdAt) are passed through instead of rejected.
    """
    booking = {}
    for key, value in doc.items():
        if key in DATE_FIELDS and isinstance(value, datetime):
            booking[key] = value.date().isoformat()
        else:
            booking[key] = _plain(value)
    return booking


def _plain(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
