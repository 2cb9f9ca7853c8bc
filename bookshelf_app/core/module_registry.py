"""Which feature modules the app mounts, and where.

Every module package exposes a ``<name>_bp`` blueprint from its
``__init__``; the registry imports it lazily so that model and service
imports only happen once the app exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string

MODULES_PACKAGE = "bookshelf_app.modules"


@dataclass(frozen=True)
class ModuleDefinition:
    name: str
    url_prefix: str
    enabled: bool = True

    @property
    def import_path(self) -> str:
        return f"{MODULES_PACKAGE}.{self.name}:{self.name}_bp"

    def load_blueprint(self) -> Blueprint:
        blueprint = import_string(self.import_path)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(f"{self.import_path} is not a Flask Blueprint (got {type(blueprint)!r})")
        return blueprint


DEFAULT_MODULES: Sequence[ModuleDefinition] = (
    ModuleDefinition("auth", url_prefix="/auth"),
    ModuleDefinition("shelves", url_prefix="/shelves"),
    ModuleDefinition("goals", url_prefix="/goals"),
)


def register_modules(app: Flask, modules: Sequence[ModuleDefinition] = DEFAULT_MODULES) -> None:
    """Mount the blueprint of every enabled module under its prefix."""
    for module in modules:
        if not module.enabled:
            app.logger.info("Module %s is disabled, skipping", module.name)
            continue
        app.register_blueprint(module.load_blueprint(), url_prefix=module.url_prefix)
        app.logger.debug("Mounted module %s at %s", module.name, module.url_prefix)
