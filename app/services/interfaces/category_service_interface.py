from abc import ABC, abstractmethod
from app.models import Category
from app.schemas.category import CategoryCreate, CategoryUpdate

class ICategoryService(ABC):
    @abstractmethod
    async def list_categories(self) -> list[Category]:
        pass

    @abstractmethod
    async def get_category(self, category_id: str) -> Category:
        pass

    @abstractmethod
    async def create_category(self, payload: CategoryCreate) -> Category:
        pass

    @abstractmethod
    async def update_category(self, category_id: str, payload: CategoryUpdate) -> Category:
        pass

    @abstractmethod
    async def delete_category(self, category_id: str) -> None:
        pass
