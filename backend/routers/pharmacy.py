# routers/pharmacy.py
"""
Pharmacy Router - medicine inventory and orders
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from models.record_schema import (
    Medicine,
    MedicineCreate,
    MedicineOrder,
    MedicineOrderCreate,
    MedicineUpdate,
    StockUpdate,
)
from services.medicine_service import get_medicine_service
from utils.logger import logger
from utils.store import RecordNotFoundError

router = APIRouter(
    prefix="/pharmacy",
    tags=["Pharmacy"]
)


@router.get(
    "/medicines",
    response_model=List[Medicine],
    summary="Medicine catalog",
    description="Optional filters: name/category search, exact category, exact stock status."
)
async def list_medicines(
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None, description="Category or 'all'"),
    status: Optional[str] = Query(None, description="In Stock | Low Stock | Out of Stock | all")
):
    return get_medicine_service().list_medicines(search=search, category=category, status=status)


@router.get(
    "/medicines/low-stock",
    response_model=List[Medicine],
    summary="Medicines with low stock"
)
async def low_stock_medicines():
    return get_medicine_service().low_stock()


@router.get(
    "/medicines/category/{category}",
    response_model=List[Medicine],
    summary="Medicines in one category"
)
async def medicines_by_category(category: str):
    return get_medicine_service().by_category(category)


@router.get(
    "/overview",
    summary="Pharmacy overview and stock distribution"
)
async def pharmacy_overview():
    return get_medicine_service().overview()


@router.get(
    "/medicines/{medicine_id}",
    response_model=Medicine,
    summary="Get one medicine"
)
async def get_medicine(medicine_id: str):
    try:
        return get_medicine_service().get_medicine(medicine_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Medicine not found")


@router.post(
    "/medicines",
    response_model=Medicine,
    status_code=201,
    summary="Add a medicine"
)
async def create_medicine(medicine: MedicineCreate):
    return get_medicine_service().create_medicine(medicine)


@router.patch(
    "/medicines/{medicine_id}",
    response_model=Medicine,
    summary="Update a medicine"
)
async def update_medicine(medicine_id: str, updates: MedicineUpdate):
    try:
        return get_medicine_service().update_medicine(medicine_id, updates)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Medicine not found")


@router.put(
    "/medicines/{medicine_id}/stock",
    response_model=Medicine,
    summary="Set stock level (status derived)"
)
async def update_stock(medicine_id: str, update: StockUpdate):
    try:
        return get_medicine_service().update_stock(medicine_id, update.stock)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Medicine not found")


@router.delete(
    "/medicines/{medicine_id}",
    summary="Delete a medicine"
)
async def delete_medicine(medicine_id: str):
    try:
        get_medicine_service().delete_medicine(medicine_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Medicine not found")
    return {"success": True, "id": medicine_id}


@router.post(
    "/orders",
    response_model=MedicineOrder,
    status_code=201,
    summary="Place a medicine order",
    description="Stores the order as Pending, decrements stock and records an order activity."
)
async def create_order(order: MedicineOrderCreate):
    try:
        return get_medicine_service().create_order(order)
    except Exception as e:
        logger.error(f"❌ [Pharmacy] order failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to place order. Please try again.")


@router.get(
    "/orders/recent",
    response_model=List[MedicineOrder],
    summary="Ten most recent orders"
)
async def recent_orders():
    return get_medicine_service().recent_orders()
