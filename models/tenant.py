from dataclasses import dataclass
from typing import Optional


@dataclass
class Tenant:
    id: int
    username: str
    full_name: str
    email: str
    room_id: int
    room_number: str
    renthouse_name: str
    phone: Optional[str] = None
    floor_number: Optional[int] = None
    renthouse_id: Optional[int] = None
    renthouse_address: Optional[str] = None
    monthly_rent: float = 0.0
    deposit: float = 0.0
    move_in_date: Optional[str] = None
    last_payment_date: Optional[str] = None
    next_payment_date: Optional[str] = None
    payment_status: Optional[str] = None
    total_paid: float = 0.0
    outstanding_balance: float = 0.0
    is_active: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "Tenant":
        return cls(
            id=data.get("id"),
            username=data.get("username") or "",
            full_name=data.get("fullName") or "",
            email=data.get("email") or "",
            phone=data.get("phone"),
            room_id=data.get("roomId"),
            room_number=str(data.get("roomNumber") or ""),
            floor_number=data.get("floorNumber"),
            renthouse_id=data.get("renthouseId"),
            renthouse_name=data.get("renthouseName") or "",
            renthouse_address=data.get("renthouseAddress"),
            monthly_rent=data.get("monthlyRent") or 0.0,
            deposit=data.get("deposit") or 0.0,
            move_in_date=data.get("moveInDate"),
            last_payment_date=data.get("lastPaymentDate"),
            next_payment_date=data.get("nextPaymentDate"),
            payment_status=data.get("paymentStatus"),
            total_paid=data.get("totalPaid") or 0.0,
            outstanding_balance=data.get("outstandingBalance") or 0.0,
            is_active=data.get("isActive", True),
        )
