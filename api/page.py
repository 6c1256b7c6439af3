"""
Vercel Python Function for the melatonin explorer page.

This endpoint handles GET requests to /api/page (and / via vercel.json) and
returns the rendered HTML page. The selected hour and open FAQ item are read
from the query string (?hour=22&faq=0).
"""

from http.server import BaseHTTPRequestHandler
import logging
import os
import sys
from pathlib import Path
from urllib.parse import urlsplit

# Add the _python directory to the Python path for importing melatonin module
sys.path.insert(0, str(Path(__file__).parent / "_python"))

from melatonin.page import render_page
from melatonin.params import parse_page_state

logger = logging.getLogger(__name__)

PAGE_CACHE_SECONDS = int(os.environ.get("PAGE_CACHE_SECONDS", "0"))


def cache_control_header() -> str:
    """Cache-Control value for rendered pages."""
    if PAGE_CACHE_SECONDS > 0:
        return f"public, max-age={PAGE_CACHE_SECONDS}"
    return "no-store"


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_GET(self):
        """Render the page for the requested state."""
        try:
            state = parse_page_state(urlsplit(self.path).query)
            body = render_page(state).encode("utf-8")
        except Exception as e:
            logger.exception("Page rendering failed")
            self._send_response(
                500,
                f"Page rendering failed: {e}".encode(),
                "text/plain; charset=utf-8",
                "no-store",
            )
            return

        self._send_response(200, body, "text/html; charset=utf-8", cache_control_header())

    def _send_response(
        self, status_code: int, body: bytes, content_type: str, cache_control: str
    ):
        """Send a response body with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", cache_control)
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
