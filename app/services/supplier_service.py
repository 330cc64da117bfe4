import logging

from app.crud.supplier_repository import SupplierRepository
from app.models import Supplier
from app.schemas.supplier import SupplierCreate, SupplierUpdate
from app.services.interfaces.supplier_service_interface import ISupplierService
from app.services.validation import merge_changes, optional_text, parse_path_id, require_text

logger = logging.getLogger(__name__)

SUPPLIER_FIELDS = ("name", "email", "phone")


class SupplierService(ISupplierService):
    def __init__(self, repo: SupplierRepository):
        self.repo = repo

    async def list_suppliers(self) -> list[Supplier]:
        suppliers = await self.repo.get_all()
        logger.info("suppliers_fetched", extra={"count": len(suppliers)})
        return suppliers

    async def get_supplier(self, supplier_id: str) -> Supplier:
        return await self.repo.get_by_id(parse_path_id(supplier_id, "Supplier"))

    async def create_supplier(self, payload: SupplierCreate) -> Supplier:
        supplier = Supplier(
            name=require_text(payload.name, "Supplier"),
            # Empty strings would collide with each other on the email constraint
            email=optional_text(payload.email),
            phone=optional_text(payload.phone),
        )
        supplier = await self.repo.create(supplier)
        logger.info("supplier_created", extra={"supplier_id": str(supplier.id)})
        return supplier

    async def update_supplier(self, supplier_id: str, payload: SupplierUpdate) -> Supplier:
        supplier = await self.get_supplier(supplier_id)

        changes = payload.model_dump(exclude_unset=True)
        merged = merge_changes(supplier, changes, SUPPLIER_FIELDS)
        require_text(merged["name"], "Supplier")

        supplier.name = merged["name"]
        supplier.email = optional_text(merged["email"])
        supplier.phone = optional_text(merged["phone"])
        supplier = await self.repo.update(supplier)
        logger.info("supplier_updated", extra={"supplier_id": str(supplier.id)})
        return supplier

    async def delete_supplier(self, supplier_id: str) -> None:
        await self.repo.delete(parse_path_id(supplier_id, "Supplier"))
        logger.info("supplier_deleted", extra={"supplier_id": supplier_id})
