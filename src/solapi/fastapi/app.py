"""FastAPI transport for the solapi operations."""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from solapi import __version__, service
from solapi.config import Settings, load_settings
from solapi.types import (
    ApiResponse,
    CreateTokenRequest,
    MintTokenRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    VerifyMessageRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def to_response(result: ApiResponse) -> JSONResponse:
    """Map an operation result onto an HTTP response (200 or 400)."""
    status_code = 200 if result.success else 400
    return JSONResponse(status_code=status_code, content=result.to_json_dict())


@router.get("/")
def root():
    """Health check endpoint"""
    return {"status": "healthy", "service": "solapi", "version": __version__}


@router.post("/keypair")
def create_keypair() -> JSONResponse:
    return to_response(service.create_keypair())


@router.post("/message/sign")
def message_sign(request: SignMessageRequest) -> JSONResponse:
    return to_response(service.sign_message(request))


@router.post("/message/verify")
def message_verify(request: VerifyMessageRequest) -> JSONResponse:
    return to_response(service.verify_message(request))


@router.post("/send/sol")
def send_sol(request: SendSolRequest) -> JSONResponse:
    return to_response(service.send_sol(request))


@router.post("/send/token")
def send_token(request: SendTokenRequest) -> JSONResponse:
    return to_response(service.send_token(request))


@router.post("/token/create")
def token_create(request: CreateTokenRequest) -> JSONResponse:
    return to_response(service.create_token(request))


@router.post("/token/mint")
def token_mint(request: MintTokenRequest) -> JSONResponse:
    return to_response(service.mint_token(request))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Body was not JSON or a field had the wrong JSON type.
    logger.info("Rejected malformed body for %s", request.url.path)
    return to_response(ApiResponse.fail("Invalid request body"))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=ApiResponse.fail("Internal server error").to_json_dict(),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Server settings. Loaded from the environment when omitted.

    Returns:
        Configured FastAPI app.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="solapi",
        description="Keypair, message signing and Solana instruction building API",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(router)
    return app


app = create_app()
