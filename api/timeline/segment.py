"""
Vercel Python Function for circadian segment lookup.

This endpoint handles GET requests to /api/timeline/segment?hour=<int> and
returns the timeline segment active at that hour along with the hour slots
it covers. Any integer hour is accepted; negative and out-of-range values
wrap around the 24-hour clock.
"""

from http.server import BaseHTTPRequestHandler
from dataclasses import asdict
import json
import logging
import sys
from pathlib import Path
from urllib.parse import urlsplit

# Add the _python directory to the Python path for importing melatonin module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from melatonin.content import CIRCADIAN_TIMELINE
from melatonin.exceptions import InvalidParameterError
from melatonin.params import MAX_QUERY_LENGTH, first_values, parse_api_hour
from melatonin.timeline import highlighted_hours, normalize_hour, resolve_segment

logger = logging.getLogger(__name__)


def lookup_segment(hour: int) -> dict:
    """Build the JSON payload for an hour."""
    segment = resolve_segment(hour, CIRCADIAN_TIMELINE)
    segment_data = None
    if segment is not None:
        segment_data = asdict(segment)
        segment_data["wraps_midnight"] = segment.wraps_midnight

    return {
        "hour": hour,
        "normalized_hour": normalize_hour(hour),
        "segment": segment_data,
        "highlighted_hours": list(highlighted_hours(segment)),
    }


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_GET(self):
        """Handle GET requests for segment lookup."""
        try:
            query = urlsplit(self.path).query
            if len(query) > MAX_QUERY_LENGTH:
                self._send_json_response(414, {"error": "Query string too long"})
                return

            hour = parse_api_hour(first_values(query).get("hour"))
            self._send_json_response(200, lookup_segment(hour))

        except InvalidParameterError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Segment lookup failed")
            self._send_json_response(500, {"error": f"Segment lookup failed: {str(e)}"})

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
