# app/crud/product_repository.py
from uuid import UUID
from sqlalchemy import Row
from sqlalchemy.future import select
from sqlalchemy.orm import joinedload
from app.crud.base import SQLAlchemyRepository
from app.models import Category, Product, Supplier

class ProductRepository(SQLAlchemyRepository[Product]):
    model = Product
    entity_name = "Product"
    reference_fields = {"category_id": Category, "supplier_id": Supplier}

    def _select(self):
        return select(Product).options(
            joinedload(Product.category),
            joinedload(Product.supplier),
        )

    async def get_summaries_by_category(self, category_id: UUID) -> list[Row]:
        stmt = select(Product.id, Product.name).where(Product.category_id == category_id)
        result = await self._execute(stmt, "list_by_category")
        return result.all()

    async def get_summaries_by_supplier(self, supplier_id: UUID) -> list[Row]:
        stmt = select(Product.id, Product.name).where(Product.supplier_id == supplier_id)
        result = await self._execute(stmt, "list_by_supplier")
        return result.all()
