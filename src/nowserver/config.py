"""Server settings — the fixed identity announced to the peer."""

from pydantic import BaseModel, ConfigDict


class ServerSettings(BaseModel):
    """Immutable configuration shared by every handler.

    There is no environment or file source; the defaults are the contract.
    """

    model_config = ConfigDict(frozen=True)

    protocol_version: str = "2024-11-05"
    server_name: str = "now-server"
    server_version: str = "1.0.0"
    tool_name: str = "get_current_time"


DEFAULT_SETTINGS = ServerSettings()
