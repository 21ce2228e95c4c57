"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Cookbook", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Relational user store
    database_url: str = Field(
        default="postgresql+psycopg2://cookbook@localhost:5432/cookbook",
        description="SQLAlchemy URL of the user database",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_pool_size: int = Field(default=4, ge=1, description="SQL connection pool size")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database connectivity check attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between connectivity check attempts"
    )

    # MongoDB settings
    mongo_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="snmf2020", description="MongoDB database name")

    # Spoonacular
    spoon_apikey: str = Field(default="", description="Spoonacular API key")
    spoon_url: str = Field(
        default="https://api.spoonacular.com/recipes",
        description="Spoonacular recipes endpoint base URL",
    )
    spoon_result_count: int = Field(default=3, ge=1, le=10)
    placeholder_image: str = Field(default="assets/images/Cook-Book-placeholder.png")

    # JSON web token
    jwt_token_secret: str = Field(default="change-me", description="HS256 signing key")
    jwt_issuer: str = Field(default="recipe-app")
    jwt_lifetime_sec: int = Field(default=60 * 60, ge=1)

    # Facebook OAuth
    facebook_app_id: str = Field(default="")
    facebook_app_secret: str = Field(default="")
    facebook_callback_url: str = Field(
        default="http://localhost:3000/auth/facebook/callback"
    )
    facebook_graph_version: str = Field(default="v12.0")
    auth_message_origin: Optional[str] = Field(
        default=None,
        description="postMessage target origin for the login popup (defaults to its own origin)",
    )

    # Outbound mail
    mail_enabled: bool = Field(default=False, description="Send welcome emails")
    mail_server: str = Field(default="localhost")
    mail_port: int = Field(default=465, ge=1, le=65535)
    mail_username: str = Field(default="")
    mail_password: str = Field(default="")
    mail_from: str = Field(default="noreply@example.com")
    mail_ssl_tls: bool = Field(default=True)
    mail_starttls: bool = Field(default=False)
    app_url: str = Field(
        default="https://gohts-recipebook.herokuapp.com/",
        description="Link included in welcome emails",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(
        default=False, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(default="Cookbook API", description="API documentation title")
    api_description: str = Field(
        default="Recipe search, meal planning and user administration",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
