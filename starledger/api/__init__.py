from fastapi import APIRouter

from starledger.api.routers import admin, balances, handles
from starledger.schemas import ErrorResponse

# every failure is rendered by api.error_handlers in this envelope
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "invalid_input"},
    500: {"model": ErrorResponse, "description": "storage_error or internal_error"},
}


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix, responses=ERROR_RESPONSES)
    router.include_router(
        handles.router,
        tags=["uid8"],
        responses={503: {"model": ErrorResponse, "description": "allocation_exhausted"}},
    )
    router.include_router(balances.router, tags=["stars"])
    router.include_router(
        admin.router,
        prefix="/cli",
        tags=["admin"],
        responses={401: {"model": ErrorResponse, "description": "unauthorized"}},
    )
    return router


__all__ = [
    "ERROR_RESPONSES",
    "create_api_router",
]
