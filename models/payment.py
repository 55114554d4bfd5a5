from dataclasses import dataclass
from typing import Optional

from .room import Room

PAYMENT_PAID = "PAID"
PAYMENT_UNPAID = "UNPAID"
PAYMENT_PENDING = "PENDING"
PAYMENT_OVERDUE = "OVERDUE"


@dataclass
class Payment:
    id: int
    room_id: int
    payment_month: str
    total_amount: float = 0.0
    type: Optional[str] = None
    room_fee: Optional[float] = None
    electricity_fee: Optional[float] = None
    water_fee: Optional[float] = None
    other_charges: Optional[float] = None
    other_charges_description: Optional[str] = None
    status: Optional[str] = None
    qr_code_data: Optional[str] = None
    paid_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    room: Optional[Room] = None
    user_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Payment":
        room = data.get("room")
        return cls(
            id=data.get("id"),
            room_id=data.get("roomId"),
            payment_month=data.get("paymentMonth") or "",
            total_amount=data.get("totalAmount") or 0.0,
            type=data.get("type"),
            room_fee=data.get("roomFee"),
            electricity_fee=data.get("electricityFee"),
            water_fee=data.get("waterFee"),
            other_charges=data.get("otherCharges"),
            other_charges_description=data.get("otherChargesDescription"),
            status=data.get("status"),
            qr_code_data=data.get("qrCodeData"),
            paid_at=data.get("paidAt"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            room=Room.from_dict(room) if room else None,
            user_name=data.get("userName"),
        )

    @property
    def is_paid(self) -> bool:
        return self.status == PAYMENT_PAID


@dataclass
class IncomeReport:
    period: str
    total_income: float = 0.0
    total_room_fees: float = 0.0
    total_electricity_fees: float = 0.0
    total_water_fees: float = 0.0
    total_other_charges: float = 0.0
    paid_payments: int = 0
    unpaid_payments: int = 0
    occupancy_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "IncomeReport":
        return cls(
            period=data.get("period") or "",
            total_income=data.get("totalIncome") or 0.0,
            total_room_fees=data.get("totalRoomFees") or 0.0,
            total_electricity_fees=data.get("totalElectricityFees") or 0.0,
            total_water_fees=data.get("totalWaterFees") or 0.0,
            total_other_charges=data.get("totalOtherCharges") or 0.0,
            paid_payments=data.get("paidPayments") or 0,
            unpaid_payments=data.get("unpaidPayments") or 0,
            occupancy_rate=data.get("occupancyRate") or 0.0,
        )
