from fastapi import HTTPException
from pymongo.collection import Collection

from booking_api.db.mongo import DatabaseNotReady, get_bookings_collection


def get_collection() -> Collection:
    try:
        return get_bookings_collection()
    except DatabaseNotReady:
        raise HTTPException(status_code=500, detail="Database not ready")
