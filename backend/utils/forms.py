# backend/utils/forms.py
from typing import Any, Dict

from fastapi import Request

from schemas.product import ProductForm

PRODUCT_FIELDS = ("name", "container", "side", "shelf", "quantity")


async def read_payload(request: Request) -> Dict[str, Any]:
    """Request body as a flat dict, from JSON or from a form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            # Unreadable JSON is treated like an empty body
            return {}
        return data if isinstance(data, dict) else {}
    form = await request.form()
    return dict(form)


async def read_product_form(request: Request) -> ProductForm:
    payload = await read_payload(request)
    return ProductForm(**{f: payload.get(f) for f in PRODUCT_FIELDS})


async def read_search_term(request: Request) -> str:
    term = (await read_payload(request)).get("name")
    return "" if term is None else str(term)
