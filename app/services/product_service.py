import logging

from sqlalchemy import Row

from app.crud.product_repository import ProductRepository
from app.models import Product
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.interfaces.product_service_interface import IProductService
from app.services.validation import (
    merge_changes,
    optional_text,
    parse_path_id,
    parse_reference_id,
    require_text,
    require_value,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "price", "quantity")


class ProductService(IProductService):
    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def list_products(self) -> list[Product]:
        products = await self.repo.get_all()
        logger.info("products_fetched", extra={"count": len(products)})
        return products

    async def get_product(self, product_id: str) -> Product:
        return await self.repo.get_by_id(parse_path_id(product_id, "Product"))

    async def create_product(self, payload: ProductCreate) -> Product:
        product = Product(
            name=require_text(payload.name, "Product"),
            category_id=parse_reference_id(payload.category_id, "category"),
            supplier_id=parse_reference_id(payload.supplier_id, "supplier"),
            price=require_value(payload.price, "Product", "price"),
            quantity=require_value(payload.quantity, "Product", "quantity"),
            image_url=optional_text(payload.image_url),
        )
        product = await self.repo.create(product)
        logger.info("product_created", extra={"product_id": str(product.id)})

        # Response embeds the related rows instead of the raw ids
        return await self.repo.get_by_id(product.id)

    async def update_product(self, product_id: str, payload: ProductUpdate) -> Product:
        product = await self.get_product(product_id)

        changes = payload.model_dump(exclude_unset=True)
        merged = merge_changes(product, changes, REQUIRED_FIELDS)
        require_text(merged["name"], "Product")
        require_value(merged["price"], "Product", "price")
        require_value(merged["quantity"], "Product", "quantity")

        if "category_id" in changes:
            changes["category_id"] = parse_reference_id(changes["category_id"], "category")
        if "supplier_id" in changes:
            changes["supplier_id"] = parse_reference_id(changes["supplier_id"], "supplier")
        if "image_url" in changes:
            changes["image_url"] = optional_text(changes["image_url"])

        for field, value in changes.items():
            setattr(product, field, value)

        await self.repo.update(product)
        logger.info("product_updated", extra={"product_id": str(product.id)})
        return await self.repo.get_by_id(product.id)

    async def delete_product(self, product_id: str) -> None:
        await self.repo.delete(parse_path_id(product_id, "Product"))
        logger.info("product_deleted", extra={"product_id": product_id})

    async def list_products_by_category(self, category_id: str) -> list[Row]:
        parsed_id = parse_reference_id(category_id, "category")
        products = await self.repo.get_summaries_by_category(parsed_id)
        logger.info("products_fetched", extra={"count": len(products), "category_id": category_id})
        return products

    async def list_products_by_supplier(self, supplier_id: str) -> list[Row]:
        parsed_id = parse_reference_id(supplier_id, "supplier")
        products = await self.repo.get_summaries_by_supplier(parsed_id)
        logger.info("products_fetched", extra={"count": len(products), "supplier_id": supplier_id})
        return products
