"""Configuration settings for Prompt Engineer Pro."""

from urllib.parse import quote_plus
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenRouter Configuration
    openrouter_api_key: Optional[str] = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "deepseek/deepseek-chat-v3-0324:free"
    llm_timeout_seconds: float = 60.0

    # Sent as HTTP-Referer / X-Title so OpenRouter can attribute requests
    site_url: str = "http://localhost:3000"
    site_name: str = "Prompt Engineer Pro"

    # Supabase Auth Configuration
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    auth_timeout_seconds: float = 15.0

    # Database Configuration (database_url wins over the mysql_* fields)
    database_url: Optional[str] = None
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_database: str = "prompt_engineer"
    mysql_user: str = "root"
    mysql_password: str = ""

    # Server Configuration
    server_host: str = "0.0.0.0"
    server_port: int = 8001

    # API Configuration
    api_prefix: str = "/api"
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL with a properly encoded password."""
        if self.database_url:
            return self.database_url
        return (
            f"mysql+aiomysql://{self.mysql_user}:{quote_plus(self.mysql_password)}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )


settings = Settings()
