import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_CONFIG
from sello_search.config.engine_config import (
    EngineConfig,
    ParserConfig,
    ScoringConfig,
    SkuConfig,
)

logger = logging.getLogger(__name__)


def _read_yaml(path, what: str) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{what} file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{what} file must contain a YAML dictionary: {path}")

    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and merge a user config with the defaults.

    Rules:
    - defaults always win where the user omits a field
    - nested sections are merged key by key
    - every section in DEFAULT_CONFIG is present in the result
    """
    user_config = _read_yaml(path, "Config") if path else {}

    config = copy.deepcopy(DEFAULT_CONFIG)
    _merge(config, user_config)

    for section in ("scoring", "parser", "sku", "vocabulary"):
        if not isinstance(config.get(section), dict):
            raise ValueError(f"Config section '{section}' must be a mapping")

    config.setdefault("observers", [])

    if path:
        logger.debug("Loaded config from %s", path)

    return config


# -------------------------------------------------
# TYPED VIEW
# -------------------------------------------------
def build_engine_config(config: Optional[Dict[str, Any]] = None) -> EngineConfig:
    config = config if config is not None else load_config(None)

    scoring = dict(config.get("scoring", {}))
    sku = dict(config.get("sku", {}))
    if "markers" in sku:
        sku["markers"] = tuple(m.lower() for m in sku["markers"])

    try:
        return EngineConfig(
            scoring=ScoringConfig(**scoring),
            parser=ParserConfig(**config.get("parser", {})),
            sku=SkuConfig(**sku),
        )
    except TypeError as exc:
        raise ValueError(f"Invalid engine config: {exc}") from exc


# -------------------------------------------------
# ALTERNATE VOCABULARY
# -------------------------------------------------
def load_vocabulary(path=None):
    """
    Load a vocabulary YAML file, or the built-in vocabulary when no
    path is given. Raises ValueError if the file's tables do not
    reference each other consistently.
    """
    from sello_search.vocabulary import Vocabulary, check_vocabulary, default_vocabulary

    if not path:
        return default_vocabulary()

    data = _read_yaml(path, "Vocabulary")
    try:
        vocab = Vocabulary.from_dict(data)
    except (TypeError, KeyError) as exc:
        raise ValueError(f"Malformed vocabulary file {path}: {exc}") from exc

    report = check_vocabulary(vocab)
    if not report.ok:
        raise ValueError(
            f"Vocabulary file {path} failed integrity checks: {', '.join(report.reasons)}"
        )

    logger.info(
        "Loaded vocabulary from %s (%d metrics, %d conditions, %d platforms)",
        path, len(vocab.metrics), len(vocab.conditions), len(vocab.platforms),
    )
    return vocab
