"""Async Python client for Set Protocol v2."""
from .client import SetClient
from .config import AppConfig, load_config

__all__ = ["AppConfig", "SetClient", "load_config"]
