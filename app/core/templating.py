from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(request: Request, view: str, context: dict[str, Any] | None = None, status_code: int = 200):
    """Render ``<view>.html`` with the session identities available to every page."""
    data: dict[str, Any] = {"error": None}
    identity = getattr(request.state, "identity", None)
    data["current_affiliate"] = identity.affiliate if identity else None
    data["current_admin"] = identity.admin if identity else None
    if context:
        data.update(context)
    return templates.TemplateResponse(request, f"{view}.html", data, status_code=status_code)
