"""
Pytest fixtures for melatonin explorer tests.
"""

import importlib.util
import sys
import threading
from http.server import HTTPServer
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from melatonin.content import CIRCADIAN_TIMELINE
from melatonin.types import TimeSegment

API_DIR = Path(__file__).parent.parent.parent


# ============================================================================
# Helper Functions for Testing
# ============================================================================

def load_function_module(relative_path: str, module_name: str):
    """
    Import a Vercel function file (e.g. "timeline/segment.py") by path.

    The api/ directory isn't a package, so handlers are loaded directly
    from their files under a test-only module name.
    """
    spec = importlib.util.spec_from_file_location(module_name, API_DIR / relative_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def segment_by_label(label: str) -> TimeSegment:
    """Find a timeline segment by its label."""
    for segment in CIRCADIAN_TIMELINE:
        if segment.label == label:
            return segment
    raise KeyError(label)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def timeline():
    """The page's circadian timeline."""
    return CIRCADIAN_TIMELINE


@pytest.fixture
def surge():
    """The wrapping 21 -> 2 segment."""
    return segment_by_label("Melatonin surge")


def _serve(handler_class):
    server = HTTPServer(("127.0.0.1", 0), handler_class)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, thread


@pytest.fixture
def page_module():
    """The page function module."""
    return load_function_module("page.py", "api_page_function")


@pytest.fixture
def page_server(page_module):
    """Base URL of a running page function."""
    server, thread = _serve(page_module.handler)
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture
def segment_module():
    """The timeline segment function module."""
    return load_function_module("timeline/segment.py", "api_timeline_segment_function")


@pytest.fixture
def segment_server(segment_module):
    """Base URL of a running segment lookup function."""
    server, thread = _serve(segment_module.handler)
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    server.server_close()
    thread.join()
