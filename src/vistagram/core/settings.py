"""Application settings and configuration.

This module defines all configuration options for the Vistagram backend.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_SHARE_CODE_LENGTH = 4
MAX_SHARE_CODE_LENGTH = 10
MAX_PROFILE_NAME_LENGTH = 100
MAX_PROFILE_BIO_LENGTH = 150


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Vistagram", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./vistagram.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Share links
    share_code_length: int = Field(default=8, alias="SHARE_CODE_LENGTH")
    share_code_max_attempts: int = Field(default=10, ge=1, alias="SHARE_CODE_MAX_ATTEMPTS")
    share_redirect_fallback: str = Field(default="/", alias="SHARE_REDIRECT_FALLBACK")
    post_url_template: str = Field(default="/p/{post_id}", alias="POST_URL_TEMPLATE")

    # Timeline and profile limits
    timeline_default_limit: int = Field(default=10, ge=1, alias="TIMELINE_DEFAULT_LIMIT")
    timeline_max_limit: int = Field(default=50, ge=1, alias="TIMELINE_MAX_LIMIT")
    # Capped at the users.bio column width.
    profile_bio_max_length: int = Field(
        default=MAX_PROFILE_BIO_LENGTH,
        ge=1,
        le=MAX_PROFILE_BIO_LENGTH,
        alias="PROFILE_BIO_MAX_LENGTH",
    )

    # Google identity provider
    google_client_id: str | None = Field(default=None, alias="GOOGLE_CLIENT_ID")
    google_tokeninfo_url: str = Field(
        default="https://oauth2.googleapis.com/tokeninfo",
        alias="GOOGLE_TOKENINFO_URL",
    )
    identity_http_timeout_seconds: float = Field(
        default=10.0,
        alias="IDENTITY_HTTP_TIMEOUT_SECONDS",
    )

    # Cloudinary image host
    cloudinary_cloud_name: str | None = Field(default=None, alias="CLOUDINARY_CLOUD_NAME")
    cloudinary_upload_preset: str | None = Field(default=None, alias="CLOUDINARY_UPLOAD_PRESET")
    cloudinary_base_url: str = Field(
        default="https://api.cloudinary.com/v1_1",
        alias="CLOUDINARY_BASE_URL",
    )
    image_upload_timeout_seconds: float = Field(
        default=30.0,
        alias="IMAGE_UPLOAD_TIMEOUT_SECONDS",
    )
    image_max_bytes: int = Field(default=10 * 1024 * 1024, alias="IMAGE_MAX_BYTES")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("share_code_length")
    @classmethod
    def validate_share_code_length(cls, v: int) -> int:
        """Keep share codes short enough for links and long enough to avoid collisions."""
        if not MIN_SHARE_CODE_LENGTH <= v <= MAX_SHARE_CODE_LENGTH:
            raise ValueError(
                f"share_code_length must be between {MIN_SHARE_CODE_LENGTH} "
                f"and {MAX_SHARE_CODE_LENGTH}"
            )
        return v

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def cloudinary_upload_url(self) -> str | None:
        """Return the unsigned upload endpoint, or None when the host is not configured."""
        if not self.cloudinary_cloud_name:
            return None
        return f"{self.cloudinary_base_url.rstrip('/')}/{self.cloudinary_cloud_name}/image/upload"


settings = Settings()  # type: ignore[call-arg]
