# backend/utils/rendering.py
from fastapi import Request
from fastapi.templating import Jinja2Templates

from config import BASE_DIR, settings

TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_title"] = settings.APP_TITLE


def render(request: Request, name: str, **context):
    return templates.TemplateResponse(request, name, context)
