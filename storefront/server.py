"""
Storefront HTTP Server

Serves the product grid locally. The dataset is loaded once at startup;
every request to "/" re-runs filter/render with the q, category and sort
query parameters. Other paths (e.g. img/{ID}.jpg) are served as static
files. Requests are handled one at a time.
"""

import http.server
import logging
import urllib.parse
from functools import partial
from pathlib import Path
from typing import Optional

from .models import FilterState
from .rendering.renderer import HtmlGridRenderer
from .sheets.loader import Storefront

logger = logging.getLogger(__name__)

PAGE_PATHS = {'/', '/index.html'}
DEFAULT_STATIC_DIR = 'output'


class StorefrontRequestHandler(http.server.SimpleHTTPRequestHandler):
    """Render the grid for page requests, serve static files otherwise."""

    storefront: Optional[Storefront] = None
    renderer: Optional[HtmlGridRenderer] = None

    def do_GET(self):
        """Handle GET request."""
        parsed = urllib.parse.urlparse(self.path)
        if parsed.path not in PAGE_PATHS:
            super().do_GET()
            return

        params = urllib.parse.parse_qs(parsed.query)
        state = FilterState.from_params(params)
        body = self.render_page(state).encode('utf-8')

        self.send_response(200)
        self.send_header('Content-Type', 'text/html; charset=utf-8')
        self.send_header('Content-Length', str(len(body)))
        self.send_header('Cache-Control', 'no-store')
        self.end_headers()
        self.wfile.write(body)

    def render_page(self, state: FilterState) -> str:
        """Re-run filter/render on the loaded products for this request."""
        if self.storefront.loaded:
            self.storefront.apply_filters(state)
        self.renderer.set_controls(state)
        return self.renderer.to_html()

    def log_message(self, format, *args):
        """Route request logs through logging instead of stderr prints."""
        logger.debug("%s - %s", self.address_string(), format % args)


def create_server(
    storefront: Storefront,
    renderer: HtmlGridRenderer,
    host: str = '127.0.0.1',
    port: int = 8000,
    static_dir: str | Path = DEFAULT_STATIC_DIR,
) -> http.server.HTTPServer:
    """
    Build a server for an already loaded storefront.

    Args:
        storefront: Loaded storefront (a failed load serves the error page)
        renderer: The renderer the storefront renders into
        host: Interface to bind
        port: Port to bind
        static_dir: Directory static files (images) are served from

    Returns:
        HTTPServer ready for serve_forever()
    """
    handler_class = type(
        'BoundStorefrontRequestHandler',
        (StorefrontRequestHandler,),
        {'storefront': storefront, 'renderer': renderer},
    )
    handler = partial(handler_class, directory=str(static_dir))
    server = http.server.HTTPServer((host, port), handler)
    logger.info("Serving storefront on http://%s:%d/", host, server.server_address[1])
    return server
