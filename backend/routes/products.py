# backend/routes/products.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from config import CONTAINERS, SIDES
from database import get_store
from schemas.product import ProductForm
from utils.coercion import parse_id
from utils.forms import read_product_form
from utils.product_store import ProductStore
from utils.rendering import render

router = APIRouter(tags=["Products"])


# =========================
# LISTA PRODUKTÓW
# =========================
@router.get("/index", response_class=HTMLResponse)
def list_products(request: Request, store: ProductStore = Depends(get_store)):
    products = store.list_all(order_by=("container", "shelf"))
    return render(request, "index.html", products=products)


@router.get("/low-stock", response_class=HTMLResponse)
def list_low_stock(request: Request, store: ProductStore = Depends(get_store)):
    products = store.list_low_stock()
    return render(request, "low_stock.html", products=products)


# =========================
# DODAWANIE PRODUKTU
# =========================
@router.get("/add", response_class=HTMLResponse)
def add_product_form(request: Request):
    return render(request, "add_product.html", containers=CONTAINERS, sides=SIDES)


@router.post("/add")
def add_product(
    form: ProductForm = Depends(read_product_form),
    store: ProductStore = Depends(get_store),
):
    store.insert(form)
    return RedirectResponse("/add", status_code=303)


# =========================
# AKTUALIZACJA PRODUKTU
# =========================
@router.get("/update/{product_id}", response_class=HTMLResponse)
def update_product_form(
    product_id: str, request: Request, store: ProductStore = Depends(get_store)
):
    product = store.get_by_id(parse_id(product_id))
    if not product:
        return PlainTextResponse("Product not found", status_code=404)

    return render(
        request,
        "update_product.html",
        product=product,
        product_id=product_id,
        containers=CONTAINERS,
        sides=SIDES,
    )


@router.post("/update/{product_id}")
def update_product(
    product_id: str,
    form: ProductForm = Depends(read_product_form),
    store: ProductStore = Depends(get_store),
):
    store.update(parse_id(product_id), form)
    return RedirectResponse("/index", status_code=303)


# =========================
# USUWANIE
# =========================
@router.post("/delete/{product_id}")
def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    store.delete_by_id(parse_id(product_id))
    return RedirectResponse("/index", status_code=303)
