from urllib.parse import urlparse

from pydantic_settings import BaseSettings

from bamboohr.core.exceptions import ConfigurationError

BAMBOOHR_GATEWAY_URL = "https://api.bamboohr.com/api/gateway.php/{subdomain}/v1"


class Settings(BaseSettings):
    # BambooHR API (key is used as the Basic auth username, password "x")
    bamboohr_api_key: str = ""
    bamboohr_subdomain: str = ""
    # Overrides the subdomain-derived gateway URL when set
    bamboohr_base_url: str = ""

    # Transport
    bamboohr_timeout_seconds: float = 30.0
    bamboohr_max_retries: int = 3

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def resolved_base_url(self) -> str:
        if self.bamboohr_base_url:
            return self.bamboohr_base_url.rstrip("/")
        if self.bamboohr_subdomain:
            return BAMBOOHR_GATEWAY_URL.format(subdomain=self.bamboohr_subdomain.strip())
        return ""

    def validate_connection(self) -> None:
        """Raise if there is no usable base URL for the API."""
        base_url = self.resolved_base_url
        if not base_url:
            raise ConfigurationError(
                "bamboohr_base_url or bamboohr_subdomain must be set"
            )
        if "{" in base_url or "}" in base_url:
            raise ConfigurationError("bamboohr_base_url must not contain '{' or '}'")
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError("bamboohr_base_url must be a valid http(s) URL")


settings = Settings()
