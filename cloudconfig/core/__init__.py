"""Core module - shared kernel for cloudconfig."""
from cloudconfig.core.config import Settings, get_settings
from cloudconfig.core.exceptions import CloudConfigError
from cloudconfig.core.models import MetaConfigRecord

__all__ = ["Settings", "get_settings", "CloudConfigError", "MetaConfigRecord"]
