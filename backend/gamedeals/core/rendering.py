from pathlib import Path

from fastapi.templating import Jinja2Templates

from gamedeals.schemas.deals import DealsView, DetailView

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_deals(view: DealsView) -> str:
    """Card grid fragment, placeholder or error banner for a list view."""
    return templates.get_template("_deals.html").render(view=view)


def render_detail(view: DetailView) -> str:
    return templates.get_template("_detail.html").render(view=view)
