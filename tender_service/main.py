from contextlib import asynccontextmanager
from tender_service.config import get_settings
from tender_service.routes import ping, users, organizations, tenders, bids
from tender_service.database import create_db_and_tables
from tender_service.logger import configure_logging, get_logger
from tender_service.services.exceptions import (
    AlreadyExistsError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    StorageFailure,
    TransitionNotAllowedError,
)
import uvicorn
from fastapi.exceptions import RequestValidationError
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = get_logger(__name__)

DOMAIN_ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    TransitionNotAllowedError: status.HTTP_400_BAD_REQUEST,
    StorageFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    create_db_and_tables()
    logger.info("startup_complete")
    yield


app = FastAPI(title="Tender Service", version="1.0.0", lifespan=lifespan)


@app.get("/")
async def root():
    return JSONResponse({
        "message": "Tender management API",
        "version": "1.0",
        "available_endpoints": "start with /api, e.g. /api/tenders"
    })


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first_error = exc.errors()[0]
    error_message = first_error.get("msg", "Invalid request")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "reason": error_message
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"reason": exc.detail}, headers=exc.headers)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = DOMAIN_ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info("request_failed", path=request.url.path, status_code=status_code, reason=exc.message)
    return JSONResponse(status_code=status_code, content={"reason": exc.message})


app.include_router(ping.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(organizations.router, prefix="/api")
app.include_router(tenders.router, prefix="/api")
app.include_router(bids.router, prefix="/api")

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.server_address, port=settings.server_port)
