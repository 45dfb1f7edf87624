"""Render confirmation email bodies from templates."""
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, select_autoescape

templates = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def format_deadline(cutoff: datetime, timezone: str = "UTC") -> str:
    """Render the cutoff as a local date guests recognize, e.g. "March 7, 2026"."""
    cutoff = cutoff.astimezone(ZoneInfo(timezone))
    return f"{cutoff:%B} {cutoff.day}, {cutoff.year}"


def render_confirmation(deadline: str, site_url: str = "") -> tuple[str, str]:
    """Return the (text, html) bodies of the confirmation notice."""
    context = {"deadline": deadline, "site_url": site_url}
    text = templates.get_template("confirmation.txt").render(context)
    html = templates.get_template("confirmation.html").render(context)
    return text.strip(), html
