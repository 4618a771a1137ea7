"""Client configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Account service client configuration.

    All values can be overridden via ``ACCOUNT_API_*`` environment variables
    or a .env file.
    """

    BASE_URL: str = "http://localhost:8000"
    TIMEOUT_SECONDS: float = 10.0
    VERIFY_TLS: bool = True

    model_config = {
        "env_prefix": "ACCOUNT_API_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = ClientSettings()
