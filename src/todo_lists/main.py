import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import ListNotFoundError
from .routers import lists as lists_router
from .routers import todos as todos_router
from .sessions import ServerSessionMiddleware, get_session, get_session_store
from .settings import get_settings
from .views import redirect

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "lists", "description": "Create, view, rename, complete and delete todo lists."},
    {"name": "todos", "description": "Add, toggle and delete todos within a list."},
]

_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Todo Lists",
    description="Session-scoped todo list manager with server-rendered pages.",
    version="0.1.0",
    openapi_tags=openapi_tags,
)

app.add_middleware(ServerSessionMiddleware, store=get_session_store(), settings=_settings)


# Global exception handlers for consistent JSON on validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for malformed requests (bad path ids,
    unparsable form bodies).

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


@app.exception_handler(ListNotFoundError)
async def list_not_found_handler(request: Request, exc: ListNotFoundError):
    """
    Send the browser back to the index with the not-found message flashed.
    """
    get_session(request).flash.set_error(exc.message)
    return redirect("/lists")


# PUBLIC_INTERFACE
@app.get("/", summary="Home", include_in_schema=False)
def home():
    return redirect("/lists")


# PUBLIC_INTERFACE
@app.get("/health", summary="Health Check", tags=["health"])
def health_check():
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of live sessions.
    """
    return {"message": "Healthy", "sessions": len(get_session_store())}


# Include routers
app.include_router(lists_router.router)
app.include_router(todos_router.router)

logger.info("Todo Lists app configured (session max age %ss)", _settings.session_max_age_seconds)
