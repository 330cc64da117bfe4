from typing import List
from fastapi import APIRouter, Depends, Response, status
from app.dependencies import get_category_service, get_product_service
from app.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from app.schemas.errors import ErrorResponse
from app.schemas.product import ProductSummary
from app.services.interfaces.category_service_interface import ICategoryService
from app.services.interfaces.product_service_interface import IProductService

router = APIRouter()

@router.get("", response_model=List[CategoryOut])
async def list_categories(category_service: ICategoryService = Depends(get_category_service)):
    categories = await category_service.list_categories()
    if not categories:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return categories

@router.post(
    "",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_category(payload: CategoryCreate, category_service: ICategoryService = Depends(get_category_service)):
    return await category_service.create_category(payload)

@router.get("/{category_id}", response_model=CategoryOut, responses={404: {"model": ErrorResponse}})
async def get_category(category_id: str, category_service: ICategoryService = Depends(get_category_service)):
    return await category_service.get_category(category_id)

@router.put(
    "/{category_id}",
    response_model=CategoryOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_category(
    category_id: str,
    payload: CategoryUpdate,
    category_service: ICategoryService = Depends(get_category_service),
):
    return await category_service.update_category(category_id, payload)

@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_category(category_id: str, category_service: ICategoryService = Depends(get_category_service)):
    await category_service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{category_id}/products", response_model=List[ProductSummary], responses={400: {"model": ErrorResponse}})
async def list_category_products(category_id: str, product_service: IProductService = Depends(get_product_service)):
    products = await product_service.list_products_by_category(category_id)
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products
