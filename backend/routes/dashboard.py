# backend/routes/dashboard.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from config import CONTAINERS
from database import get_store
from schemas.product import DashboardSummary
from utils.product_store import ProductStore
from utils.rendering import render

router = APIRouter(tags=["Dashboard"])


def build_summary(store: ProductStore) -> DashboardSummary:
    # Zero-filled for every configured container
    containers = {c: 0 for c in CONTAINERS}
    containers.update(store.count_by_container())

    return DashboardSummary(
        containers=containers,
        total_products=store.count_total(),
        low_stock=store.count_low_stock(),
        containers_used=sum(1 for count in containers.values() if count > 0),
    )


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request, store: ProductStore = Depends(get_store)):
    summary = build_summary(store)
    return render(request, "home.html", **summary.model_dump())
