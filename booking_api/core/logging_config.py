from loguru import logger
import os
import sys
from dotenv import load_dotenv

load_dotenv()

LOG_DIR = os.getenv("LOG_DIR", "logs")

APP_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} | {message}"

# Booking records are bound with log_type="booking" and booking_id
BOOKING_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | booking={extra[booking_id]} | {message}"

os.makedirs(LOG_DIR, exist_ok=True)

logger.remove()

# Console
logger.add(sys.stderr, level="INFO", format=APP_FORMAT)

# Every request, connection event and validation rejection
logger.add(
    os.path.join(LOG_DIR, "app.log"),
    rotation="1 week",
    retention="4 weeks",
    level="INFO",
    enqueue=True,
    format=APP_FORMAT,
)

# Accepted bookings only
logger.add(
    os.path.join(LOG_DIR, "bookings.log"),
    rotation="1 week",
    retention="4 weeks",
    level="INFO",
    enqueue=True,
    filter=lambda record: record["extra"].get("log_type") == "booking",
    format=BOOKING_FORMAT,
)

# Persistence failures and connection errors, with tracebacks
logger.add(
    os.path.join(LOG_DIR, "errors.log"),
    rotation="1 week",
    retention="8 weeks",
    level="ERROR",
    enqueue=True,
    backtrace=True,
    format=APP_FORMAT,
)


def get_logger():
    return logger
