"""Printer/part compatibility engine.

Static tables are loaded once per application by :func:`init_app` and kept
in ``app.extensions["compat"]``. :func:`get_stores` and :func:`get_resolver`
build stores and a resolver over the current request's session.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Tuple

from flask import Flask, current_app

from extensions import db

from .aliases import AliasTable
from .errors import CompatError, NotFound, ValidationError
from .model_codes import ModelCodeExtractor
from .resolver import CompatibilityResolver, PrinterParts
from .tables import load_alias_table, load_manual_overlay, load_model_patterns

if TYPE_CHECKING:
    from .stores import ModelPartStore, PartStore, PrinterStore


@dataclass(frozen=True)
class CompatTables:
    aliases: AliasTable
    overlay: Mapping[str, Tuple[str, ...]]
    extractor: ModelCodeExtractor


@dataclass(frozen=True)
class Stores:
    printers: "PrinterStore"
    parts: "PartStore"
    model_parts: "ModelPartStore"


def load_tables(config) -> CompatTables:
    return CompatTables(
        aliases=load_alias_table(config["MODEL_ALIASES_PATH"]),
        overlay=load_manual_overlay(config["MANUAL_PARTS_MAP_PATH"]),
        extractor=load_model_patterns(config["MODEL_NAME_PATTERNS_PATH"]),
    )


def init_app(app: Flask) -> None:
    app.extensions["compat"] = load_tables(app.config)


def get_tables() -> CompatTables:
    return current_app.extensions["compat"]


def get_stores() -> Stores:
    # stores import the domain models, whose packages import this one
    from .stores import ModelPartStore, PartStore, PrinterStore

    session = db.session
    return Stores(
        printers=PrinterStore(session),
        parts=PartStore(session),
        model_parts=ModelPartStore(session),
    )


def get_resolver() -> CompatibilityResolver:
    stores = get_stores()
    return CompatibilityResolver(
        printers=stores.printers,
        parts=stores.parts,
        model_parts=stores.model_parts,
        aliases=get_tables().aliases,
    )


__all__ = [
    "AliasTable",
    "CompatError",
    "CompatTables",
    "CompatibilityResolver",
    "ModelCodeExtractor",
    "NotFound",
    "PrinterParts",
    "Stores",
    "ValidationError",
    "get_resolver",
    "get_stores",
    "get_tables",
    "init_app",
    "load_tables",
]
