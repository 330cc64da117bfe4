# app/crud/category_repository.py
from app.crud.base import SQLAlchemyRepository
from app.models import Category

class CategoryRepository(SQLAlchemyRepository[Category]):
    model = Category
    entity_name = "Category"
    unique_fields = ("name",)
    case_insensitive_fields = ("name",)
