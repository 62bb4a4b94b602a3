from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "0.0.0.0"


class Settings(BaseSettings):
    """
    Service settings. The first three fields are required; the process does
    not start without them.
    """
    jira_base_url: str = Field(..., description="Jira Base URL, e.g. https://jira.example.com")
    bind_address: str = Field(..., description="host:port the webhook listener binds to")
    destination_hook_url: str = Field(..., description="Incoming chat webhook that receives notifications")

    app_name: str = "jira-to-hook"
    env: str = Field(default="local", validation_alias="APP_ENV")
    log_level: str = "INFO"
    log_format: str | None = Field(default=None, validation_alias="LOG_FORMAT")
    dispatch_timeout_seconds: float = Field(default=10.0, gt=0)
    message_icon: str | None = ":slinky:"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("bind_address")
    @classmethod
    def _require_port(cls, value: str) -> str:
        _, sep, port = value.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError("bind_address must look like host:port or :port")
        return value

    @property
    def host(self) -> str:
        host, _, _ = self.bind_address.rpartition(":")
        # uvicorn wants IPv6 literals without brackets
        return host.strip("[]") or DEFAULT_HOST

    @property
    def port(self) -> int:
        _, _, port = self.bind_address.rpartition(":")
        return int(port)
