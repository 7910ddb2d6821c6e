import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from bookstore.logging import logger

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects and registers all HTTP routers for the application.

    Every module in ``api/http`` must expose a ``router``; each one is
    imported and included in the main ``APIRouter`` instance, which is then
    returned as the entry point for the application's API.
    """
    # Initialize main router
    main_router: APIRouter = APIRouter()

    # Get project dir
    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    # Get API routers
    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        # Get api module
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        # Add api router to main router
        main_router.include_router(api.router)

        # Only log on first registration
        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
