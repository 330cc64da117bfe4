# interfaces/product_service_interface.py
from abc import ABC, abstractmethod
from sqlalchemy import Row
from app.models import Product
from app.schemas.product import ProductCreate, ProductUpdate

class IProductService(ABC):
    @abstractmethod
    async def list_products(self) -> list[Product]:
        pass

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        pass

    @abstractmethod
    async def create_product(self, payload: ProductCreate) -> Product:
        pass

    @abstractmethod
    async def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        pass

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        pass

    @abstractmethod
    async def list_products_by_category(self, category_id: str) -> list[Row]:
        pass

    @abstractmethod
    async def list_products_by_supplier(self, supplier_id: str) -> list[Row]:
        pass
