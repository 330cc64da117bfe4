from uuid import UUID
from pydantic import BaseModel, ConfigDict
from typing import Optional

class CategoryCreate(BaseModel):
    name: Optional[str] = None

class CategoryUpdate(BaseModel):
    name: Optional[str] = None

class CategoryOut(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)
