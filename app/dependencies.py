from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.db.session import get_db
from app.crud.category_repository import CategoryRepository
from app.crud.product_repository import ProductRepository
from app.crud.supplier_repository import SupplierRepository
from app.services.category_service import CategoryService
from app.services.interfaces.category_service_interface import ICategoryService
from app.services.interfaces.product_service_interface import IProductService
from app.services.interfaces.supplier_service_interface import ISupplierService
from app.services.product_service import ProductService
from app.services.supplier_service import SupplierService

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_category_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ICategoryService:
    repo = CategoryRepository(db, case_insensitive_names=settings.UNIQUE_NAMES_CASE_INSENSITIVE)
    return CategoryService(repo=repo)

def get_supplier_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ISupplierService:
    repo = SupplierRepository(db, case_insensitive_names=settings.UNIQUE_NAMES_CASE_INSENSITIVE)
    return SupplierService(repo=repo)

def get_product_service(db: AsyncSession = Depends(get_db)) -> IProductService:
    return ProductService(repo=ProductRepository(db))
