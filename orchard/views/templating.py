"""Jinja2 template setup for the server-rendered pages."""

from pathlib import Path
from urllib.parse import urlencode

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def with_token(path: str, token: str) -> str:
    """Append the session token so the next page stays authenticated."""
    return f"{path}?{urlencode({'token': token})}"
