"""
Server-rendered melatonin explorer page.

Builds a plain-dict view model from the static content and the current
PageState, then renders it through Jinja2 templates packaged alongside this
module. Every interactive control is a GET form, so the next state is
encoded in the link or button that triggers it.
"""

from dataclasses import asdict
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from .content import (
    CIRCADIAN_TIMELINE,
    FAQ_ITEMS,
    FUNCTIONS,
    GUIDELINES,
    PAGE_DESCRIPTION,
    PAGE_TITLE,
    PRODUCTION_STEPS,
    QUICK_FACTS,
    REFERENCES,
    SAFETY_PRACTICES,
)
from .faq import is_faq_open, toggle_faq
from .params import MAX_HOUR, MIN_HOUR, format_faq_value
from .timeline import HOURS_PER_DAY, highlighted_hours, resolve_segment
from .types import PageState

_env = Environment(
    loader=PackageLoader("melatonin", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_page_context(state: PageState) -> dict[str, Any]:
    """
    Assemble the template context for one render.

    Args:
        state: Selected hour and open FAQ index

    Returns:
        Dict of primitives and lists; the active segment is None when the
        timeline has no segment for the hour, and the template then skips
        the description panel.
    """
    active = resolve_segment(state.hour, CIRCADIAN_TIMELINE)
    active_hours = set(highlighted_hours(active))

    faq_entries = [
        {
            "index": index,
            "question": item.question,
            "answer": item.answer,
            "open": is_faq_open(state.open_faq_index, index),
            "toggle_value": format_faq_value(toggle_faq(state.open_faq_index, index)),
        }
        for index, item in enumerate(FAQ_ITEMS)
    ]

    return {
        "title": PAGE_TITLE,
        "description": PAGE_DESCRIPTION,
        "hour": state.hour,
        "hour_label": f"{state.hour}:00",
        "min_hour": MIN_HOUR,
        "max_hour": MAX_HOUR,
        "faq_value": format_faq_value(state.open_faq_index),
        "active_segment": asdict(active) if active is not None else None,
        "slots": [
            {"hour": hour, "active": hour in active_hours}
            for hour in range(HOURS_PER_DAY)
        ],
        "quick_facts": [asdict(fact) for fact in QUICK_FACTS],
        "guidelines": [asdict(guideline) for guideline in GUIDELINES],
        "production_steps": list(PRODUCTION_STEPS),
        "functions": list(FUNCTIONS),
        "safety_practices": list(SAFETY_PRACTICES),
        "faq_items": faq_entries,
        "references": [asdict(ref) for ref in REFERENCES],
    }


def render_page(state: PageState) -> str:
    """Render the full HTML document for a page state."""
    template = _env.get_template("page.html")
    return template.render(**build_page_context(state))
