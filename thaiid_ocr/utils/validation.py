"""
Input validation for image URIs and Vision API credentials.
"""

import re
from typing import List, Optional

from .error_handler import ConfigurationError, ValidationError

# Schemes the Vision API can fetch an image from
IMAGE_URI_SCHEMES = ['http', 'https', 'gs']

_IMAGE_URI_PATTERN = re.compile(r'^(?P<scheme>[a-z][a-z0-9+.-]*)://\S+$', re.IGNORECASE)


def validate_image_uri(uri: str, allowed_schemes: Optional[List[str]] = None) -> str:
    """
    Validate an image URI before handing it to the Vision API.

    Args:
        uri: Public http(s) URL or gs:// Cloud Storage URI
        allowed_schemes: List of allowed URI schemes (default: http, https, gs)

    Returns:
        The URI with surrounding whitespace removed

    Raises:
        ValidationError: If the URI is empty, malformed or uses another scheme
    """
    if allowed_schemes is None:
        allowed_schemes = IMAGE_URI_SCHEMES

    if not isinstance(uri, str) or not uri.strip():
        raise ValidationError(
            "Image URI must be a non-empty string",
            details={"image_uri": uri}
        )

    normalized = uri.strip()
    match = _IMAGE_URI_PATTERN.match(normalized)
    if not match:
        raise ValidationError(
            f"Invalid image URI format: {normalized}",
            details={"image_uri": normalized, "allowed_schemes": allowed_schemes}
        )

    scheme = match.group("scheme").lower()
    if scheme not in allowed_schemes:
        raise ValidationError(
            f"URI scheme '{scheme}' not allowed. Allowed schemes: {allowed_schemes}",
            details={"image_uri": normalized, "scheme": scheme, "allowed_schemes": allowed_schemes}
        )

    return normalized


def validate_api_key(api_key: Optional[str]) -> str:
    """
    Validate the Vision API key.

    Raises:
        ConfigurationError: If the key is missing or a placeholder value
    """
    if not api_key or not isinstance(api_key, str) or not api_key.strip():
        raise ConfigurationError(
            "Vision API key is not configured",
            details={"setting": "API_KEY"}
        )

    normalized_key = api_key.strip()
    if normalized_key.lower() in ['none', 'null', 'undefined']:
        raise ConfigurationError(
            "API key cannot be empty or placeholder value",
            details={"setting": "API_KEY"}
        )

    return normalized_key
