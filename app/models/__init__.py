from app.models.category import Category
from app.models.supplier import Supplier
from app.models.product import Product

__all__ = ["Category", "Supplier", "Product"]
