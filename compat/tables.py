"""Loading of the static JSON data assets (aliases, overlay, name patterns)."""

import json
import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from .aliases import AliasTable
from .model_codes import ModelCodeExtractor

logger = logging.getLogger(__name__)


def _read_json(path: str):
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot load data table {path}: {e}") from e


def _code_lists(path: str, data) -> Mapping[str, Tuple[str, ...]]:
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected an object of code -> list")
    out = {}
    for code, values in data.items():
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"{path}: entry {code!r} must be a list of strings")
        out[str(code)] = tuple(values)
    return MappingProxyType(out)


def load_alias_table(path: str) -> AliasTable:
    table = AliasTable(_code_lists(path, _read_json(path)))
    logger.info("Loaded %d alias entries from %s", len(table), path)
    return table


def load_manual_overlay(path: str) -> Mapping[str, Tuple[str, ...]]:
    overlay = _code_lists(path, _read_json(path))
    logger.info("Loaded %d manual mapping entries from %s", len(overlay), path)
    return overlay


def load_model_patterns(path: str) -> ModelCodeExtractor:
    data = _read_json(path)
    if not isinstance(data, list) or not all(
        isinstance(p, list) and len(p) == 2 and all(isinstance(s, str) for s in p) for p in data
    ):
        raise ValueError(f"{path}: expected a list of [fragment, code] pairs")
    extractor = ModelCodeExtractor(data)
    logger.info("Loaded %d model name patterns from %s", len(extractor), path)
    return extractor
