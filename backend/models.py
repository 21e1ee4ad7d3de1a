from typing import List, Optional, Union

from pydantic import BaseModel, Field

# Coordinates keep whatever numeric form the client sent, so "12, 77" stays "12, 77"
Coordinate = Union[int, float]


class Product(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    unit: str
    image: Optional[str] = ""


class OrderItem(BaseModel):
    name: str
    qty: int = Field(..., gt=0)


class Order(BaseModel):
    name: str
    phone: str
    items: List[OrderItem]
    total: float = Field(..., ge=0)
    location: str  # "<lat>, <lon>"
    date: str  # locale-style timestamp captured when the order was recorded


# --- Request bodies ---

class OrderRequest(BaseModel):
    name: str
    phone: str
    items: List[OrderItem] = Field(..., min_length=1)
    latitude: Coordinate
    longitude: Coordinate


class ProductsPayload(BaseModel):
    products: List[Product]
