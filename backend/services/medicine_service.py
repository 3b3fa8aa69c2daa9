# services/medicine_service.py
"""
Medicine Service

Pharmacy inventory and medicine orders.

Stock status is derived from the stock level:
  0 (or below) → "Out of Stock", < LOW_STOCK_THRESHOLD → "Low Stock", else "In Stock"
"""

import calendar
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from models.record_schema import MedicineCreate, MedicineOrderCreate, MedicineUpdate
from services.activity_service import get_activity_service
from utils.config import get_settings
from utils.logger import logger
from utils.store import get_collection

IN_STOCK = "In Stock"
LOW_STOCK = "Low Stock"
OUT_OF_STOCK = "Out of Stock"


def stock_status(stock: int, threshold: Optional[int] = None) -> str:
    limit = threshold if threshold is not None else get_settings().LOW_STOCK_THRESHOLD
    if stock <= 0:
        return OUT_OF_STOCK
    if stock < limit:
        return LOW_STOCK
    return IN_STOCK


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


class MedicineService:

    def __init__(self):
        self.medicines = get_collection("medicines")
        self.orders = get_collection("medicine_orders")

    # ============================================================
    # Inventory
    # ============================================================

    def list_medicines(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Catalog with the table filters

        Args:
            search: substring of name or category, case-insensitive
            category: exact category ("all" = any)
            status: exact stock status ("all" = any)
        """
        records = self.medicines.all()
        if search:
            needle = search.lower()
            records = [m for m in records if needle in m["name"].lower() or needle in m["category"].lower()]
        if category and category != "all":
            records = [m for m in records if m["category"] == category]
        if status and status != "all":
            records = [m for m in records if m["status"] == status]
        return records

    def get_medicine(self, medicine_id: str) -> Dict[str, Any]:
        return self.medicines.get(medicine_id)

    def create_medicine(self, medicine: MedicineCreate) -> Dict[str, Any]:
        data = medicine.model_dump()
        if data["status"] is None:
            data["status"] = stock_status(data["stock"])
        record = self.medicines.insert(data)
        logger.info(f"💊 [Pharmacy] added {record['name']} ({record['stock']}, {record['status']})")
        return record

    def update_medicine(self, medicine_id: str, updates: MedicineUpdate) -> Dict[str, Any]:
        """Partial update; a new stock without an explicit status re-derives it"""
        data = updates.model_dump(exclude_unset=True)
        if "stock" in data and data.get("status") is None:
            data["status"] = stock_status(data["stock"])
        return self.medicines.patch(medicine_id, data)

    def delete_medicine(self, medicine_id: str):
        self.medicines.delete(medicine_id)

    def by_category(self, category: str) -> List[Dict[str, Any]]:
        return self.medicines.filter(lambda m: m["category"] == category)

    def low_stock(self) -> List[Dict[str, Any]]:
        return self.medicines.filter(lambda m: m["status"] == LOW_STOCK)

    def update_stock(self, medicine_id: str, stock: int) -> Dict[str, Any]:
        status = stock_status(stock)
        logger.info(f"📦 [Pharmacy] stock {medicine_id} → {stock} ({status})")
        return self.medicines.patch(medicine_id, {"stock": stock, "status": status})

    def overview(self, today: Optional[date] = None) -> Dict[str, Any]:
        """
        Pharmacy overview cards and stock distribution chart

        Returns:
            {
                "total_medicines": int,
                "low_stock": int,
                "out_of_stock": int,
                "expiring_soon": int,  # expiry within three months
                "distribution": [
                    {"category": str, "total_stock": int, "in_stock": int, "low_stock": int, "out_of_stock": int}
                ]
            }
        """
        records = self.medicines.all()
        horizon = _add_months(today or date.today(), 3).isoformat()

        distribution: Dict[str, Dict[str, Any]] = {}
        for med in records:
            row = distribution.setdefault(med["category"], {
                "category": med["category"],
                "total_stock": 0,
                "in_stock": 0,
                "low_stock": 0,
                "out_of_stock": 0,
            })
            row["total_stock"] += med["stock"]
            if med["status"] == LOW_STOCK:
                row["low_stock"] += 1
            elif med["status"] == OUT_OF_STOCK:
                row["out_of_stock"] += 1
            else:
                row["in_stock"] += 1

        return {
            "total_medicines": len(records),
            "low_stock": sum(1 for m in records if m["status"] == LOW_STOCK),
            "out_of_stock": sum(1 for m in records if m["status"] == OUT_OF_STOCK),
            "expiring_soon": sum(1 for m in records if m["expiry_date"][:10] <= horizon),
            "distribution": list(distribution.values()),
        }

    # ============================================================
    # Orders
    # ============================================================

    def create_order(self, order: MedicineOrderCreate) -> Dict[str, Any]:
        """
        Place an order

        1. Store it as "Pending"
        2. Decrement stock per item (unknown medicine ids are skipped)
        3. Record an "order" activity
        """
        record = self.orders.insert({
            **order.model_dump(),
            "status": "Pending",
            "order_date": datetime.now(timezone.utc).isoformat(),
        })

        for item in order.items:
            medicine = self.medicines.find(item.medicine_id)
            if medicine is None:
                logger.warning(f"⚠️ [Pharmacy] order {record['id']}: unknown medicine {item.medicine_id}")
                continue
            new_stock = medicine["stock"] - item.quantity
            self.medicines.patch(item.medicine_id, {"stock": new_stock, "status": stock_status(new_stock)})

        get_activity_service().record(
            activity_type="order",
            title="Medicine Order Placed",
            description=f"Order for {len(order.items)} medicines has been placed",
            category="pharmacy",
            status="pending",
            related_id=record["id"],
            metadata={"notes": order.notes or "No additional notes"},
        )

        logger.info(f"🛒 [Pharmacy] order {record['id']} placed: {len(order.items)} items, total {order.total_amount}")
        return record

    def recent_orders(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Newest orders first"""
        return list(reversed(self.orders.all()))[:limit]


# Singleton instance
_medicine_service: Optional[MedicineService] = None


def get_medicine_service() -> MedicineService:
    """Return the MedicineService singleton"""
    global _medicine_service
    if _medicine_service is None:
        _medicine_service = MedicineService()
    return _medicine_service
