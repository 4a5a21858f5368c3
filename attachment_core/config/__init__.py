"""Configuration module for attachment core.

Available Configurations:
- DocumentFormatConfig: Header/trailer signature of the accepted document kind
- DisplayCacheConfig: Grace delay, sweep interval and host capacity
"""

from attachment_core.config.attachment_config import (
    DEFAULT_DISPLAY_CACHE_CONFIG,
    PDF_DOCUMENT_FORMAT,
    TEST_DISPLAY_CACHE_CONFIG,
    DisplayCacheConfig,
    DocumentFormatConfig,
)

__all__ = [
    "DocumentFormatConfig",
    "DisplayCacheConfig",
    "PDF_DOCUMENT_FORMAT",
    "DEFAULT_DISPLAY_CACHE_CONFIG",
    "TEST_DISPLAY_CACHE_CONFIG",
]
