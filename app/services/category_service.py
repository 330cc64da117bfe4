import logging

from app.crud.category_repository import CategoryRepository
from app.models import Category
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.interfaces.category_service_interface import ICategoryService
from app.services.validation import merge_changes, parse_path_id, require_text

logger = logging.getLogger(__name__)


class CategoryService(ICategoryService):
    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    async def list_categories(self) -> list[Category]:
        categories = await self.repo.get_all()
        logger.info("categories_fetched", extra={"count": len(categories)})
        return categories

    async def get_category(self, category_id: str) -> Category:
        return await self.repo.get_by_id(parse_path_id(category_id, "Category"))

    async def create_category(self, payload: CategoryCreate) -> Category:
        name = require_text(payload.name, "Category")
        category = await self.repo.create(Category(name=name))
        logger.info("category_created", extra={"category_id": str(category.id)})
        return category

    async def update_category(self, category_id: str, payload: CategoryUpdate) -> Category:
        category = await self.get_category(category_id)

        changes = payload.model_dump(exclude_unset=True)
        merged = merge_changes(category, changes, ("name",))
        require_text(merged["name"], "Category")

        category.name = merged["name"]
        category = await self.repo.update(category)
        logger.info("category_updated", extra={"category_id": str(category.id)})
        return category

    async def delete_category(self, category_id: str) -> None:
        await self.repo.delete(parse_path_id(category_id, "Category"))
        logger.info("category_deleted", extra={"category_id": category_id})
