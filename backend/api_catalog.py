from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from .database import get_catalog_store, get_uploads_dir
from .models import Product, ProductsPayload
from .store import CatalogStore, StoreUnavailable
from .uploads import discard_upload, save_upload

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/products", response_model=List[Product])
def list_products(store: CatalogStore = Depends(get_catalog_store)):
    return store.load_all()


# Admin uploads image + adds product
@router.post("/add-product")
def add_product(
    name: str = Form(..., min_length=1),
    price: float = Form(..., ge=0),
    unit: str = Form(...),
    image: Optional[UploadFile] = File(None),
    store: CatalogStore = Depends(get_catalog_store),
    uploads_dir: Path = Depends(get_uploads_dir),
):
    new_product = Product(
        name=name,
        price=price,
        unit=unit,
        image=save_upload(image, uploads_dir),
    )
    try:
        store.append(new_product)
    except StoreUnavailable:
        discard_upload(new_product.image, uploads_dir)
        raise
    return {"message": "✅ Product added successfully!", "product": new_product}


# Admin saves the full edited list (edit/delete)
@router.post("/products")
def save_products(payload: ProductsPayload, store: CatalogStore = Depends(get_catalog_store)):
    store.replace_all(payload.products)
    return {"message": "✅ Products saved successfully!"}
