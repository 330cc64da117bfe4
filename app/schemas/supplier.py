from uuid import UUID
from pydantic import BaseModel, ConfigDict
from typing import Optional

class SupplierCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

class SupplierUpdate(SupplierCreate):
    pass

class SupplierOut(BaseModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
