from typing import List
from fastapi import APIRouter, Depends, Response, status
from app.dependencies import get_product_service
from app.schemas.errors import ErrorResponse
from app.schemas.product import ProductCreate, ProductOut, ProductUpdate
from app.services.interfaces.product_service_interface import IProductService

router = APIRouter()

@router.get("", response_model=List[ProductOut])
async def list_products(product_service: IProductService = Depends(get_product_service)):
    products = await product_service.list_products()
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products

@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_product(payload: ProductCreate, product_service: IProductService = Depends(get_product_service)):
    return await product_service.create_product(payload)

@router.get("/{product_id}", response_model=ProductOut, responses={404: {"model": ErrorResponse}})
async def get_product(product_id: str, product_service: IProductService = Depends(get_product_service)):
    return await product_service.get_product(product_id)

@router.put(
    "/{product_id}",
    response_model=ProductOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    product_service: IProductService = Depends(get_product_service),
):
    return await product_service.update_product(product_id, payload)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"model": ErrorResponse}})
async def delete_product(product_id: str, product_service: IProductService = Depends(get_product_service)):
    await product_service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
