from contextlib import asynccontextmanager
from typing import AsyncGenerator, List

import sentry_sdk
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration

from gymbro.config import settings
from gymbro.models.match import MatchRecord
from gymbro.models.profile import Profile, ProfileUpsert
from gymbro.models.swipe import SwipeRequest
from gymbro.services.matching_service import MatchingService
from gymbro.services.repository import SnapshotRepository
from gymbro.utils.errors import GymBroError
from gymbro.utils.logging import configure_logging, get_logger, log_error

logger = get_logger(__name__)

# Initialize Sentry if DSN is provided
if settings.SENTRY_DSN:
    logger.info("Initializing Sentry...")
    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.ENVIRONMENT,
            traces_sample_rate=1.0 if settings.ENVIRONMENT == "development" else 0.1,
            integrations=[FastApiIntegration(transaction_style="url")],
        )
        logger.info("Sentry initialized")
    except Exception as e:
        logger.error("Failed to initialize Sentry", error=str(e))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan."""
    configure_logging()
    logger.info("Starting API...", data_file=settings.DATA_FILE)

    try:
        app.state.matching_service = MatchingService.open(
            SnapshotRepository(settings.DATA_FILE),
            default_image_url=settings.DEFAULT_IMAGE_URL,
        )
    except GymBroError as e:
        logger.error("Failed to load snapshot", error=str(e), details=e.details)
        raise

    yield

    logger.info("Shutting down API...")


app = FastAPI(
    title=settings.APP_NAME,
    description="Swipe-based gym partner matching",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(GymBroError)
async def gymbro_error_handler(request: Request, exc: GymBroError) -> JSONResponse:
    if exc.status_code >= 500:
        log_error(logger, exc, "Request failed", extra={"path": request.url.path})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message, "details": exc.details})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": [str(part) for part in err["loc"]], "msg": err["msg"]} for err in exc.errors()]
    message = "Invalid user ID" if any(err["loc"][:1] == ["path"] for err in errors) else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message, "details": {"errors": errors}})


def get_matching_service(request: Request) -> MatchingService:
    return request.app.state.matching_service


@app.get("/health")
def health_check(service: MatchingService = Depends(get_matching_service)) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "ok",
            "app": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
            "profiles": len(service.list_profiles()),
        }
    )


@app.get("/api/users", response_model=List[Profile])
def list_users(service: MatchingService = Depends(get_matching_service)) -> List[Profile]:
    return service.list_profiles()


@app.get("/api/users/{user_id}", response_model=Profile)
def get_user(user_id: int, service: MatchingService = Depends(get_matching_service)) -> Profile:
    return service.get_profile(user_id)


@app.get("/api/next-user/{user_id}", response_model=Profile)
def next_user(user_id: int, service: MatchingService = Depends(get_matching_service)) -> Profile:
    return service.next_candidate(user_id)


@app.get("/api/matches/{user_id}", response_model=List[MatchRecord])
def list_matches(user_id: int, service: MatchingService = Depends(get_matching_service)) -> List[MatchRecord]:
    return service.get_matches(user_id)


@app.post("/api/swipe")
def swipe(body: SwipeRequest, service: MatchingService = Depends(get_matching_service)) -> JSONResponse:
    result = service.swipe(body.actor_id, body.target_id, body.is_like)
    return JSONResponse(content=result.to_wire())


@app.post("/api/profiles", response_model=Profile)
def upsert_profile(body: ProfileUpsert, service: MatchingService = Depends(get_matching_service)) -> Profile:
    return service.upsert_profile(body)
