# app/crud/supplier_repository.py
from app.crud.base import SQLAlchemyRepository
from app.models import Supplier

class SupplierRepository(SQLAlchemyRepository[Supplier]):
    model = Supplier
    entity_name = "Supplier"
    # Checked in this order when labelling a duplicate
    unique_fields = ("name", "email")
    case_insensitive_fields = ("name",)
