# backend/routes/containers.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from config import CONTAINERS
from database import get_store
from utils.coercion import parse_int
from utils.product_store import ProductStore
from utils.rendering import render

router = APIRouter(prefix="/container", tags=["Containers"])

DEFAULT_CONTAINER = 1


@router.get("")
def default_container():
    return RedirectResponse(f"/container/{DEFAULT_CONTAINER}", status_code=302)


@router.get("/{container_id}", response_class=HTMLResponse)
def container_view(
    container_id: str, request: Request, store: ProductStore = Depends(get_store)
):
    # Ids outside the configured set (or not numbers at all) still render
    cid = parse_int(container_id)
    products = store.list_by_container(cid)
    return render(
        request,
        "container.html",
        container_id=cid,
        products=products,
        containers=CONTAINERS,
    )
