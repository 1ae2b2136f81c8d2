from fastapi import APIRouter, Depends, HTTPException
from pymongo.collection import Collection

from booking_api.core.dependencies import get_collection
from booking_api.core.logging_config import get_logger
from booking_api.schemas.booking import (
    BookingCreate,
    BookingCreated,
    BookingList,
    serialize_booking,
)
from booking_api.services.validation import build_booking_document, validate_booking

router = APIRouter(prefix="/bookings", tags=["Bookings"])
logger = get_logger()


# ---------------------------------------------------------------------
# CREATE BOOKING
# ---------------------------------------------------------------------
@router.post("", status_code=201, response_model=BookingCreated)
def create_booking(data: BookingCreate, collection: Collection = Depends(get_collection)):
    try:
        start, end = validate_booking(data)
    except HTTPException as e:
        logger.warning(f"Booking rejected | {e.detail}")
        raise

    document = build_booking_document(data, start, end)

    try:
        result = collection.insert_one(document)
    except Exception:
        logger.exception("Error inserting booking")
        raise HTTPException(status_code=500, detail="Error inserting data")

    logger.bind(log_type="booking", booking_id=str(result.inserted_id)).info(
        f"Booking Created | Email={data.email} "
        f"| Stay={start.isoformat()}..{end.isoformat()}"
    )

    return BookingCreated(insertedId=str(result.inserted_id))


# ---------------------------------------------------------------------
# LIST BOOKINGS
# ---------------------------------------------------------------------
@router.get("", response_model=BookingList)
def list_bookings(collection: Collection = Depends(get_collection)):
    try:
        bookings = [serialize_booking(doc) for doc in collection.find()]
    except Exception:
        logger.exception("Error fetching booking details")
        raise HTTPException(status_code=500, detail="Error fetching booking details")

    return BookingList(bookings=bookings)
