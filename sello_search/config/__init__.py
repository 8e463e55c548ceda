from .loader import build_engine_config, load_config, load_vocabulary
from .defaults import DEFAULT_CONFIG
from .engine_config import EngineConfig, ParserConfig, ScoringConfig, SkuConfig

__all__ = [
    "load_config",
    "load_vocabulary",
    "build_engine_config",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "ParserConfig",
    "ScoringConfig",
    "SkuConfig",
]
