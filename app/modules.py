# =============================================================================
# app/modules.py - Feature Modules
# =============================================================================
# A feature module is a self-contained slice of the API: a name, a URL
# prefix, OpenAPI tags and a factory that builds its router from the
# validated settings. Modules share no state and declare no dependencies on
# each other, so the order they are composed in doesn't matter.
#
# Composition rejects duplicate module names and any two modules whose
# routes for the same method could match the same request path, literal or
# templated (`/items/{name}` overlaps `/items/special`). Without overlaps,
# mount order cannot change which handler serves a request.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from fastapi import APIRouter, FastAPI
from fastapi.routing import APIRoute
from starlette.routing import compile_path

from app.config import Settings
from app.exceptions import ModuleCompositionError
from app.routers import blockchain, content, faq, health

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@dataclass(frozen=True)
class FeatureModule:
    """One composable unit of the application."""
    name: str
    router_factory: Callable[[Settings], APIRouter]
    prefix: str = API_PREFIX
    tags: tuple[str, ...] = field(default_factory=tuple)

    def build(self, settings: Settings) -> APIRouter:
        return self.router_factory(settings)


HEALTH_MODULE = FeatureModule(name="health", router_factory=health.create_router, tags=("Health",))
BLOCKCHAIN_MODULE = FeatureModule(name="blockchain", router_factory=blockchain.create_router, tags=("Blockchain",))
FAQ_MODULE = FeatureModule(name="faq", router_factory=faq.create_router, tags=("FAQ",))
CONTENT_MODULE = FeatureModule(name="content", router_factory=content.create_router, tags=("Content",))

DEFAULT_MODULES: tuple[FeatureModule, ...] = (
    HEALTH_MODULE,
    BLOCKCHAIN_MODULE,
    FAQ_MODULE,
    CONTENT_MODULE,
)


def _route_keys(prefix: str, router: APIRouter) -> set[tuple[str, str]]:
    keys = set()
    for route in router.routes:
        if isinstance(route, APIRoute):
            for method in route.methods:
                keys.add((method, prefix + route.path))
    return keys


def _overlaps(first: str, second: str) -> bool:
    """True when a request path could be served by either route template."""
    first_regex = compile_path(first)[0]
    second_regex = compile_path(second)[0]
    return bool(first_regex.match(second) or second_regex.match(first))


def compose_modules(
    app: FastAPI,
    modules: Iterable[FeatureModule],
    settings: Settings,
    reserved: Iterable[tuple[str, str]] = (),
) -> list[str]:
    """
    Build every module's router and mount it on the app.

    Args:
        app: Application to mount routers on
        modules: Feature modules to compose, in any order
        settings: Validated settings, passed to each router factory
        reserved: (method, path) pairs already owned by the app itself

    Returns:
        Names of the mounted modules, in mount order

    Raises:
        ModuleCompositionError: Duplicate names or overlapping routes
    """
    modules = list(modules)
    names = [module.name for module in modules]

    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ModuleCompositionError(f"duplicate module names {duplicates}", names)

    # Build everything before mounting so a collision leaves the app untouched
    owned: list[tuple[str, str, str]] = [(method, path, "app") for method, path in reserved]
    built: list[tuple[FeatureModule, APIRouter]] = []
    for module in modules:
        router = module.build(settings)
        keys = sorted(_route_keys(module.prefix, router))
        for method, path in keys:
            for other_method, other_path, owner in owned:
                if other_method == method and _overlaps(path, other_path):
                    raise ModuleCompositionError(
                        f"{method} {path} in '{module.name}' overlaps {other_path} in '{owner}'",
                        names,
                    )
        owned.extend((method, path, module.name) for method, path in keys)
        built.append((module, router))

    for module, router in built:
        app.include_router(router, prefix=module.prefix, tags=list(module.tags))
        logger.info(f"Mounted module '{module.name}' at {module.prefix}")

    return names
