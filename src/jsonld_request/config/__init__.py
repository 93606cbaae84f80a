"""Configuration management using pydantic-settings."""

from jsonld_request.config.settings import RequestSettings, get_settings

__all__ = ["RequestSettings", "get_settings"]
