from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking_api.api.routes import bookings
from booking_api.core.config import load_settings
from booking_api.core.logging_config import get_logger
from booking_api.db import mongo

logger = get_logger()

# Refuses to start without MONGO_URI
settings = load_settings()
mongo.configure(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    mongo.close_connection()


app = FastAPI(
    title="Resort Booking API",
    version="1.0.0",
    description="Booking intake: validate reservation requests and store them in MongoDB",
    lifespan=lifespan,
)


# ⭐ Request Logging Middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"REQUEST: {request.method} {request.url}")

    try:
        response = await call_next(request)
        logger.info(f"RESPONSE: {response.status_code} {request.url}")
        return response

    except Exception as e:
        logger.error(f"ERROR: {request.url} -> {str(e)}")
        raise e


# Errors are always rendered as {"message": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body | {request.url} | {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(bookings.router)


@app.get("/", tags=["Root"])
def root():
    return {"message": "Backend running successfully"}


def run():
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
