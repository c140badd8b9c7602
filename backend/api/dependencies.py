from functools import lru_cache

from fastapi import Depends

from backend.config import AppConfig
from backend.pipeline.orchestrator import ValuationPipeline


class ConfigStore:
    """Holds the current AppConfig; routes swap in new immutable configs."""
    def __init__(self, config: AppConfig):
        self.config = config


@lru_cache
def get_config_store() -> ConfigStore:
    return ConfigStore(AppConfig.from_env())


def get_config(store: ConfigStore = Depends(get_config_store)) -> AppConfig:
    return store.config


def get_pipeline(config: AppConfig = Depends(get_config)) -> ValuationPipeline:
    return ValuationPipeline(config=config)
