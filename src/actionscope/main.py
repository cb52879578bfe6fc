"""Application entry point and composition root."""

import logging

from actionscope import __version__
from actionscope.config import get_settings
from actionscope.infrastructure.permission.permission_checker import ScopePermissionChecker
from actionscope.interfaces.api.app import create_app
from actionscope.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_actionscope_app(unit_of_work_factory: type | None = None):
    """Composition root - build the Falcon app from settings.

    ``unit_of_work_factory`` is the data store adapter of the hosting
    deployment; without it only the snapshot decision API is served.
    """
    settings = get_settings()
    configure_logging(settings)
    permission_checker = (
        ScopePermissionChecker(unit_of_work_factory) if unit_of_work_factory else None
    )
    app = create_app(
        unit_of_work_factory=unit_of_work_factory,
        cors_origins=settings.cors_origin_list,
        permission_checker=permission_checker,
    )
    logger.info("ActionScope v%s ready (%s)", __version__, settings.environment)
    return app


def main() -> None:
    """CLI entry point - serve the decision API with uvicorn."""
    import uvicorn

    settings = get_settings()
    print(f"ActionScope v{__version__}")
    uvicorn.run(
        create_actionscope_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
