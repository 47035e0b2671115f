"""Thai ID OCR - extract Thai national ID card fields from OCR text."""

__version__ = "1.0.0"
__description__ = "HTTP service that reads Thai national ID card fields from Google Vision text detection"

from .core.types import CardRecord
from .ocr.extract import card_extractor, extract
from .utils.config import settings
from .utils.log import configure_logging, get_logger
from .vision.client import VisionClient

__all__ = [
    # Version info
    "__version__",
    "__description__",
    # Core functionality
    "CardRecord",
    "extract",
    "card_extractor",
    "VisionClient",
    "settings",
    "configure_logging",
    "get_logger",
]
