from dataclasses import dataclass
from typing import Optional

ROOM_AVAILABLE = "AVAILABLE"
ROOM_BOOKED = "BOOKED"
ROOM_OCCUPIED = "OCCUPIED"


@dataclass
class Room:
    id: int
    room_number: str
    description: Optional[str] = None
    monthly_rent: Optional[float] = None
    deposit: Optional[float] = None
    status: Optional[str] = None
    booked_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    # Denormalised location of the room
    floor_id: Optional[int] = None
    floor_number: Optional[int] = None
    renthouse_id: Optional[int] = None
    renthouse_name: Optional[str] = None
    renthouse_address: Optional[str] = None

    # Current renter, if any
    renter_id: Optional[int] = None
    renter_name: Optional[str] = None
    renter_username: Optional[str] = None
    renter_full_name: Optional[str] = None
    renter_email: Optional[str] = None
    renter_phone: Optional[str] = None
    move_in_date: Optional[str] = None

    is_favorite: bool = False
    is_occupied: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Room":
        return cls(
            id=data.get("id"),
            room_number=str(data.get("roomNumber") or ""),
            description=data.get("description"),
            monthly_rent=data.get("monthlyRent"),
            deposit=data.get("deposit"),
            status=data.get("status"),
            booked_at=data.get("bookedAt"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            floor_id=data.get("floorId"),
            floor_number=data.get("floorNumber"),
            renthouse_id=data.get("renthouseId"),
            renthouse_name=data.get("renthouseName"),
            renthouse_address=data.get("renthouseAddress"),
            renter_id=data.get("renterId"),
            renter_name=data.get("renterName"),
            renter_username=data.get("renterUsername"),
            renter_full_name=data.get("renterFullName"),
            renter_email=data.get("renterEmail"),
            renter_phone=data.get("renterPhone"),
            move_in_date=data.get("moveInDate"),
            is_favorite=bool(data.get("isFavorite")),
            is_occupied=bool(data.get("isOccupied")),
        )

    @property
    def is_available(self) -> bool:
        return self.status == ROOM_AVAILABLE

    @property
    def can_bill(self) -> bool:
        """A payment can only be issued for a room that has a renter."""
        return self.is_occupied and self.renter_id is not None
