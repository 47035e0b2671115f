"""HTTP API: image URI in, parsed Thai ID card fields out."""

from typing import Callable, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..ocr.extract import card_extractor
from ..utils import config
from ..utils.config import Settings
from ..utils.error_handler import (
    ConfigurationError,
    ErrorContext,
    NetworkError,
    ValidationError,
    VisionAPIError,
    handle_error,
)
from ..utils.log import get_logger
from ..utils.validation import validate_image_uri
from ..vision.client import VisionClient
from .schemas import CardRecordResponse, ErrorResponse, OCRRequest

logger = get_logger(__name__)

INVALID_PAYLOAD = "Invalid request payload"
NOT_CONFIGURED = "OCR service is not configured"
VISION_FAILED = "Error making request to Vision API"

VisionClientFactory = Callable[[Settings], VisionClient]


def default_vision_client(settings: Settings) -> VisionClient:
    return VisionClient(
        api_key=settings.API_KEY,
        endpoint=settings.VISION_API_URL,
        timeout_s=settings.VISION_TIMEOUT_S,
        feature_type=settings.VISION_FEATURE_TYPE,
    )


def create_app(
    settings: Optional[Settings] = None,
    vision_client_factory: Optional[VisionClientFactory] = None,
) -> FastAPI:
    if settings is None:
        settings = config.settings
    if vision_client_factory is None:
        vision_client_factory = default_vision_client

    app = FastAPI(title="Thai ID OCR Service", description="Thai national ID card field extraction")

    @app.exception_handler(RequestValidationError)
    async def invalid_payload(request: Request, exc: RequestValidationError):
        logger.warning("Rejected request payload", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"detail": INVALID_PAYLOAD})

    @app.get("/")
    async def root():
        return {"status": "ok", "service": "thaiid-ocr"}

    @app.post(
        "/ocr",
        response_model=CardRecordResponse,
        response_model_by_alias=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def ocr_id_card(payload: OCRRequest):
        context = ErrorContext(
            operation="ocr_id_card",
            module=__name__,
            function="ocr_id_card",
            input_data={"image_uri": payload.image_uri},
        )

        try:
            image_uri = validate_image_uri(payload.image_uri)
        except ValidationError as e:
            handle_error(e, context, logger, reraise=False)
            raise HTTPException(status_code=400, detail=INVALID_PAYLOAD)

        try:
            client = vision_client_factory(settings)
        except ConfigurationError as e:
            handle_error(e, context, logger, reraise=False)
            raise HTTPException(status_code=500, detail=NOT_CONFIGURED)

        try:
            async with client:
                text = await client.detect_text(image_uri)
        except (NetworkError, VisionAPIError) as e:
            handle_error(e, context, logger, reraise=False)
            raise HTTPException(status_code=500, detail=VISION_FAILED)

        record = card_extractor.extract_card_record(text)
        logger.info("Card parsed", **record.to_dict())
        return CardRecordResponse.from_record(record)

    return app


app = create_app()
