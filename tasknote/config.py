"""
Configuration for Tasknote
Settings are read from the environment (TASKNOTE_ prefix) or a .env file
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""
    model_config = SettingsConfigDict(
        env_prefix="TASKNOTE_",
        env_file=".env",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./tasknote.db"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Reminders
    reminder_title: str = "Task Reminder"

    # UI
    default_theme: str = "system"
    suggestion_limit: int = 5

    # MCP
    mcp_server_name: str = "Tasknote MCP Server"


settings = Settings()

__all__ = ["Settings", "settings"]
