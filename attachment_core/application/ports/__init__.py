"""Application ports (interfaces) for attachment core."""

from attachment_core.application.ports.display_host import DisplayHostProtocol
from attachment_core.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["DisplayHostProtocol", "TimeAuthorityProtocol"]
