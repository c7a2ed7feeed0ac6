"""Storage module - meta config persistence."""
from cloudconfig.storage.base import MetaConfigStore
from cloudconfig.storage.local import LocalMetaConfigStore, load_meta_config, save_meta_config

__all__ = ["MetaConfigStore", "LocalMetaConfigStore", "load_meta_config", "save_meta_config"]
