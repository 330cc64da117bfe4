from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Optional
from app.schemas.category import CategoryOut
from app.schemas.supplier import SupplierOut

# quantity is stored in a 32-bit INTEGER column
Quantity = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]
Price = Annotated[float, Field(allow_inf_nan=False)]

# Reference ids stay strings here so a malformed id gets its own
# "Invalid ... ID format" error instead of a generic body error.
class ProductCreate(BaseModel):
    name: Optional[str] = None
    category_id: Optional[str] = None
    price: Optional[Price] = None
    quantity: Optional[Quantity] = None
    image_url: Optional[str] = None
    supplier_id: Optional[str] = None

class ProductUpdate(ProductCreate):
    pass

class ProductOut(BaseModel):
    id: UUID
    name: str
    category: CategoryOut
    price: float
    quantity: int
    image_url: Optional[str] = None
    supplier: SupplierOut

    model_config = ConfigDict(from_attributes=True)

class ProductSummary(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)
