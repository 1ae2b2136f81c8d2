import re
from datetime import date, datetime, timezone

from fastapi import HTTPException

from booking_api.schemas.booking import BookingCreate

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MOBILE_RE = re.compile(r"[0-9]{10}")

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "mobile",
    "address",
    "start_date",
    "end_date",
)


# ---------------------------------------------------------------------
# DATE PARSING
# ---------------------------------------------------------------------
def parse_date(value: str) -> date:
    """Accept YYYY-MM-DD or a full ISO datetime (its date part is used)."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    # Python < 3.11 does not read the "Z" suffix sent by JS toISOString()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format")


# ---------------------------------------------------------------------
# VALIDATION SEQUENCE
# ---------------------------------------------------------------------
def validate_booking(data: BookingCreate, today: date | None = None):
    """
    Run the checks in order and stop at the first failure.
    Returns the parsed (start_date, end_date).
    """
    if any(not getattr(data, name) for name in REQUIRED_FIELDS):
        raise HTTPException(
            status_code=400,
            detail="All fields including start and end dates are required"
        )

    if not EMAIL_RE.fullmatch(data.email):
        raise HTTPException(status_code=400, detail="Invalid email format")

    if not MOBILE_RE.fullmatch(data.mobile):
        raise HTTPException(status_code=400, detail="Invalid mobile number format")

    start = parse_date(data.start_date)
    end = parse_date(data.end_date)

    if start < (today or date.today()):
        raise HTTPException(status_code=400, detail="Start date cannot be in the past")

    if end <= start:
        raise HTTPException(status_code=400, detail="End date must be after start date")

    return start, end


# ---------------------------------------------------------------------
# DOCUMENT
# ---------------------------------------------------------------------
def build_booking_document(data: BookingCreate, start: date, end: date) -> dict:
    # BSON has no date type, dates are kept as midnight datetimes
    return {
        "first_name": data.first_name,
        "last_name": data.last_name,
        "email": data.email,
        "mobile": data.mobile,
        "address": data.address,
        "message": data.message or "",
        "start_date": datetime.combine(start, datetime.min.time()),
        "end_date": datetime.combine(end, datetime.min.time()),
        "created_at": datetime.now(timezone.utc),
    }
