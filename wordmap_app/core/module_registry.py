"""Declarative list of the feature modules mounted on the app.

A feature module is a package under ``wordmap_app.modules`` that exposes a
``module_metadata`` dict and a JSON blueprint in ``routes/api.py``. The
metadata supplies the URL prefix and the ``enabled`` switch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string

from ..extensions import csrf_protect


@dataclass(frozen=True)
class ModuleDefinition:
    """A feature package and the name of its API blueprint."""

    package: str
    blueprint_name: str
    url_prefix: Optional[str] = None
    csrf_exempt: bool = True

    @property
    def routes_path(self) -> str:
        return f"{self.package}.routes.api"

    def load_metadata(self) -> dict:
        return dict(getattr(import_string(self.package), "module_metadata", {}))

    def load_blueprint(self) -> Blueprint:
        blueprint = import_string(f"{self.routes_path}:{self.blueprint_name}")
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                f"{self.routes_path}:{self.blueprint_name} is {type(blueprint)!r}, not a Flask Blueprint"
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    for module in modules:
        metadata = module.load_metadata()
        name = metadata.get("name", module.package)
        if not metadata.get("enabled", True):
            app.logger.info("Module %s is disabled, not registered", name)
            continue

        blueprint = module.load_blueprint()
        if module.csrf_exempt:
            csrf_protect.exempt(blueprint)
        url_prefix = module.url_prefix or metadata.get("url_prefix")
        app.register_blueprint(blueprint, url_prefix=url_prefix)
        app.logger.debug("Registered module %s at %s", name, url_prefix or "<root>")


def register_default_modules(app: Flask) -> None:
    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("wordmap_app.modules.auth", "auth_api_bp"),
    ModuleDefinition("wordmap_app.modules.vaults", "vaults_api_bp"),
    ModuleDefinition("wordmap_app.modules.mindmap", "mindmap_api_bp"),
    ModuleDefinition("wordmap_app.modules.flashcards", "flashcards_api_bp"),
    ModuleDefinition("wordmap_app.modules.texts", "texts_api_bp"),
    ModuleDefinition("wordmap_app.modules.sentences", "sentences_api_bp"),
    ModuleDefinition("wordmap_app.modules.profile", "profile_api_bp"),
)
