from abc import ABC, abstractmethod
from app.models import Supplier
from app.schemas.supplier import SupplierCreate, SupplierUpdate

class ISupplierService(ABC):
    @abstractmethod
    async def list_suppliers(self) -> list[Supplier]:
        pass

    @abstractmethod
    async def get_supplier(self, supplier_id: str) -> Supplier:
        pass

    @abstractmethod
    async def create_supplier(self, payload: SupplierCreate) -> Supplier:
        pass

    @abstractmethod
    async def update_supplier(self, supplier_id: str, payload: SupplierUpdate) -> Supplier:
        pass

    @abstractmethod
    async def delete_supplier(self, supplier_id: str) -> None:
        pass
