# backend/routes/search.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from database import get_store
from utils.forms import read_search_term
from utils.product_store import ProductStore
from utils.rendering import render

router = APIRouter(prefix="/search", tags=["Search"])


@router.get("", response_class=HTMLResponse)
def search_form(request: Request):
    return render(request, "search_product.html", results=None, term="")


@router.post("", response_class=HTMLResponse)
def search_products(
    request: Request,
    term: str = Depends(read_search_term),
    store: ProductStore = Depends(get_store),
):
    results = store.search(term)
    return render(request, "search_product.html", results=results, term=term)
