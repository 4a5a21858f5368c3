"""Production adapters for application ports."""

from attachment_core.infrastructure.adapters.object_url_registry import (
    HANDLE_PREFIX,
    ObjectUrlRegistry,
    StoredResource,
)
from attachment_core.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = [
    "HANDLE_PREFIX",
    "ObjectUrlRegistry",
    "StoredResource",
    "SystemTimeAuthority",
]
