from typing import List
from fastapi import APIRouter, Depends, Response, status
from app.dependencies import get_product_service, get_supplier_service
from app.schemas.errors import ErrorResponse
from app.schemas.product import ProductSummary
from app.schemas.supplier import SupplierCreate, SupplierOut, SupplierUpdate
from app.services.interfaces.product_service_interface import IProductService
from app.services.interfaces.supplier_service_interface import ISupplierService

router = APIRouter()

@router.get("", response_model=List[SupplierOut])
async def list_suppliers(supplier_service: ISupplierService = Depends(get_supplier_service)):
    suppliers = await supplier_service.list_suppliers()
    if not suppliers:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return suppliers

@router.post(
    "",
    response_model=SupplierOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_supplier(payload: SupplierCreate, supplier_service: ISupplierService = Depends(get_supplier_service)):
    return await supplier_service.create_supplier(payload)

@router.get("/{supplier_id}", response_model=SupplierOut, responses={404: {"model": ErrorResponse}})
async def get_supplier(supplier_id: str, supplier_service: ISupplierService = Depends(get_supplier_service)):
    return await supplier_service.get_supplier(supplier_id)

@router.put(
    "/{supplier_id}",
    response_model=SupplierOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_supplier(
    supplier_id: str,
    payload: SupplierUpdate,
    supplier_service: ISupplierService = Depends(get_supplier_service),
):
    return await supplier_service.update_supplier(supplier_id, payload)

@router.delete(
    "/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def delete_supplier(supplier_id: str, supplier_service: ISupplierService = Depends(get_supplier_service)):
    await supplier_service.delete_supplier(supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{supplier_id}/products", response_model=List[ProductSummary], responses={400: {"model": ErrorResponse}})
async def list_supplier_products(supplier_id: str, product_service: IProductService = Depends(get_product_service)):
    products = await product_service.list_products_by_supplier(supplier_id)
    if not products:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return products
