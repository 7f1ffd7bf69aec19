"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Nothing here changes ledger semantics; settings only affect logging and display.
"""

from pydantic_settings import BaseSettings


class LedgerConfig(BaseSettings):
    """Simple ledger configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_operations: bool = True  # Debug record per successful deposit/withdrawal
    
    # Display configuration
    amount_display_places: int = 2
    statement_date_format: str = "%Y-%m-%d %H:%M"
    statement_newest_first: bool = False
    
    class Config:
        env_prefix = "LEDGER_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
