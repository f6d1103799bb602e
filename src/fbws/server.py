"""aiohttp server for FBWS.

Application factory and the catch-all route that hands every request
to the router.
"""

import logging

from aiohttp import web

from fbws.app_keys import pages_key
from fbws.config import Config
from fbws.core.compiler import compile_site
from fbws.core.pages import PageSet
from fbws.core.router import dispatch

logger = logging.getLogger(__name__)


async def serve_page(request: web.Request) -> web.Response:
    """Serve the compiled page selected by the router."""
    result = dispatch(request.method, request.path, request.app[pages_key])
    return web.Response(status=result.status, text=result.body, content_type="text/html")


def create_app(pages: PageSet) -> web.Application:
    """Create aiohttp application.

    Args:
        pages: Compiled pages, shared read-only by all handlers

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[pages_key] = pages

    # All methods go through the router; non-GET requests get the 404 page
    app.router.add_route("*", "/{path:.*}", serve_page)

    return app


def build_pages(config: Config) -> PageSet:
    """Compile all pages described by the configuration.

    Raises:
        BuildError: If any page cannot be compiled
    """
    site = config.site
    return compile_site(
        site.content_dir,
        site.theme_path,
        site.title,
        site.header_path,
        home_path=site.home_path,
        not_found_path=site.not_found_path,
    )


def run_server(config: Config, pages: PageSet) -> None:
    """Run the server until interrupted.

    Pages must already be compiled; use build_pages() first so a build
    failure stops startup before the listener is bound.

    Args:
        config: Application configuration
        pages: Compiled pages to serve
    """
    app = create_app(pages)

    logger.info("Serving on http://%s:%d", config.server.host, config.server.port)
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
