from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import Optional
import logging

from config.settings import Settings
from providers.llm_provider import LLMProvider, LLMProviderFactory
from utils.request_gate import API_KEY_HEADER, CORS_REJECTED_MESSAGE, UNAUTHORIZED_MESSAGE, RequestGate

from models.request_models import AdsCalcRequest, BioRequest, NameRequest, SubsCalcRequest, TitleRequest
from models.response_models import (
    AdsCalcResponse,
    BioResponse,
    ErrorResponse,
    NameResponse,
    SubsCalcResponse,
    TitleResponse,
)
from services.calculator_service import calculate_ads, calculate_subs
from services.generation_service import GenerationService

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def get_generation_service(request: Request) -> GenerationService:
    return request.app.state.generation_service


def _error_response(endpoint: str, error: Exception) -> JSONResponse:
    logger.error("%s failed: %s", endpoint, str(error), exc_info=True)
    return JSONResponse(status_code=500, content={"error": str(error)})


# ==== AI endpoints ====

@router.post("/generate-title", response_model=TitleResponse, responses=ERROR_RESPONSES)
async def generate_title(
    body: Optional[TitleRequest] = None,
    service: GenerationService = Depends(get_generation_service),
):
    """Stream title ideas"""
    try:
        return await service.generate_titles(body or TitleRequest())
    except Exception as e:
        return _error_response("generate-title", e)


@router.post("/generate-name", response_model=NameResponse, responses=ERROR_RESPONSES)
async def generate_name(
    body: Optional[NameRequest] = None,
    service: GenerationService = Depends(get_generation_service),
):
    """Channel username ideas"""
    try:
        return await service.generate_names(body or NameRequest())
    except Exception as e:
        return _error_response("generate-name", e)


@router.post("/generate-bio", response_model=BioResponse, responses=ERROR_RESPONSES)
async def generate_bio(
    body: Optional[BioRequest] = None,
    service: GenerationService = Depends(get_generation_service),
):
    """Channel bio lines"""
    try:
        return await service.generate_bios(body or BioRequest())
    except Exception as e:
        return _error_response("generate-bio", e)


# ==== Calculators (local, no AI) ====

@router.post("/calc-subs", response_model=SubsCalcResponse)
async def calc_subs(body: Optional[SubsCalcRequest] = None):
    return calculate_subs(body or SubsCalcRequest())


@router.post("/calc-ads", response_model=AdsCalcResponse)
async def calc_ads(body: Optional[AdsCalcRequest] = None):
    return calculate_ads(body or AdsCalcRequest())


@router.get("/health", response_class=PlainTextResponse)
async def health_check():
    return "OK"


def create_app(settings: Optional[Settings] = None, provider: Optional[LLMProvider] = None) -> FastAPI:
    """Build the application from one resolved settings object"""
    settings = settings or Settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    for warning in settings.validate_settings():
        logger.warning(warning)

    provider_info = settings.get_current_provider_info()
    logger.info(
        "AI provider: %s (model %s, %s)",
        provider_info["provider"], provider_info["model"], provider_info["status"]
    )

    gate = RequestGate.from_settings(settings)

    app = FastAPI(
        title="Streamer Toolkit API",
        description="Stream title, username and bio generation plus earnings calculators",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.generation_service = GenerationService(provider or LLMProviderFactory.get_provider(settings))

    # middleware added last runs first: origin gate -> CORS -> API key -> routes

    @app.middleware("http")
    async def api_key_gate(request: Request, call_next):
        if gate.requires_api_key(request.url.path) and not gate.is_api_key_valid(request.headers.get(API_KEY_HEADER)):
            logger.warning("Rejected %s %s: missing or invalid API key", request.method, request.url.path)
            return JSONResponse(status_code=401, content={"error": UNAUTHORIZED_MESSAGE})
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=gate.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def origin_gate(request: Request, call_next):
        origin = request.headers.get("origin")
        if not gate.is_origin_allowed(origin):
            logger.warning("Rejected origin %s for %s %s", origin, request.method, request.url.path)
            return PlainTextResponse(CORS_REJECTED_MESSAGE, status_code=403)
        return await call_next(request)

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = app.state.settings.PORT
    logger.info("Server listening on %s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
