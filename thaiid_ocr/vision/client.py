"""Google Cloud Vision integration for text detection."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from ..core.constants import BACKOFF_S, RETRYABLE_STATUS, VISION_API_URL, VISION_FEATURE_TYPE
from ..utils.error_handler import NetworkError, VisionAPIError
from ..utils.log import LoggerMixin
from ..utils.validation import validate_api_key


def build_annotate_request(image_uri: str, feature_type: str = VISION_FEATURE_TYPE) -> dict:
    return {
        "requests": [
            {
                "image": {"source": {"imageUri": image_uri}},
                "features": [{"type": feature_type}],
            }
        ]
    }


def _malformed(part: str, value: Any) -> VisionAPIError:
    return VisionAPIError(
        "Unexpected Vision API response",
        details={"part": part, "payload_type": type(value).__name__}
    )


def parse_annotate_response(payload: Any) -> str:
    """
    Pull the full-text description out of an annotate response.

    Returns:
        Text of the first annotation, or "" when nothing was detected

    Raises:
        VisionAPIError: If any part of the payload is not an object or it reports an error
    """
    if not isinstance(payload, dict):
        raise _malformed("payload", payload)

    responses = payload.get("responses") or []
    if not isinstance(responses, list):
        raise _malformed("responses", responses)
    if not responses:
        return ""

    first = responses[0] or {}
    if not isinstance(first, dict):
        raise _malformed("responses[0]", first)

    if first.get("error"):
        error = first["error"]
        if not isinstance(error, dict):
            raise _malformed("error", error)
        raise VisionAPIError(
            error.get("message", "Vision API returned an error"),
            details={"code": error.get("code"), "status": error.get("status")}
        )

    annotations = first.get("textAnnotations") or []
    if not isinstance(annotations, list):
        raise _malformed("textAnnotations", annotations)
    if not annotations:
        return ""
    if not isinstance(annotations[0], dict):
        raise _malformed("textAnnotations[0]", annotations[0])
    return annotations[0].get("description", "") or ""


class VisionClient(LoggerMixin):
    """Client for the Vision images:annotate endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        endpoint: str = VISION_API_URL,
        timeout_s: float = 30.0,
        feature_type: str = VISION_FEATURE_TYPE,
    ):
        self.api_key = validate_api_key(api_key)
        self.endpoint = endpoint
        self.timeout_s = timeout_s
        self.feature_type = feature_type
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "VisionClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _ensure_session(self) -> None:
        """Ensure aiohttp session exists."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_s)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def _post_with_backoff(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST with exponential backoff for retryable statuses."""
        await self._ensure_session()
        params = {"key": self.api_key}

        for attempt, delay in enumerate([0.0, *BACKOFF_S]):
            if delay > 0:
                await asyncio.sleep(delay)

            try:
                async with self.session.post(self.endpoint, params=params, json=body) as response:
                    if response.status in RETRYABLE_STATUS and attempt < len(BACKOFF_S):
                        self.logger.warning(
                            "Vision API retryable status",
                            status=response.status,
                            attempt=attempt + 1,
                        )
                        continue
                    if response.status >= 400:
                        raise VisionAPIError(
                            f"Vision API request failed with status {response.status}",
                            details={"status": response.status, "attempts": attempt + 1}
                        )
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise VisionAPIError(
                            "Vision API returned invalid JSON",
                            details={"error": str(e)}
                        ) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise NetworkError(
                    "Error making request to Vision API",
                    details={"error": str(e), "error_type": type(e).__name__}
                ) from e

        raise RuntimeError("All retry attempts failed")

    async def detect_text(self, image_uri: str) -> str:
        """Run TEXT_DETECTION on an image URI and return the full text."""
        context = self.log_start("Vision text detection", image_uri=image_uri)
        try:
            payload = await self._post_with_backoff(
                build_annotate_request(image_uri, self.feature_type)
            )
            text = parse_annotate_response(payload)
        except (NetworkError, VisionAPIError) as e:
            self.log_error(context, e)
            raise

        self.log_success(context, text_length=len(text))
        return text

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None
