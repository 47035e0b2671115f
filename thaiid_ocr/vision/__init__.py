"""Vision package for remote text detection."""

from .client import VisionClient, build_annotate_request, parse_annotate_response

__all__ = ["VisionClient", "build_annotate_request", "parse_annotate_response"]
