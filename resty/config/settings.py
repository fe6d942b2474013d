from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RestySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    default_timeout_seconds: float = Field(10.0, gt=0, validation_alias="RESTY_DEFAULT_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(True, validation_alias="RESTY_FOLLOW_REDIRECTS")
    verify_ssl: bool = Field(True, validation_alias="RESTY_VERIFY_SSL")
    # Empty means httpx's own User-Agent.
    user_agent: str = Field("", validation_alias="RESTY_USER_AGENT")

    http_backend: str = Field("httpx", validation_alias="RESTY_HTTP_BACKEND")

    # False restores the old behavior of silently dropping a body that fails to encode.
    strict_body_encoding: bool = Field(True, validation_alias="RESTY_STRICT_BODY_ENCODING")
