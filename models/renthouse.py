from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .room import Room


@dataclass
class Floor:
    id: int
    floor_number: int
    description: Optional[str] = None
    rooms: List[Room] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Floor":
        return cls(
            id=data.get("id"),
            floor_number=data.get("floorNumber"),
            description=data.get("description"),
            rooms=[Room.from_dict(r) for r in data.get("rooms") or []],
        )


@dataclass
class Renthouse:
    id: int
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    base_rent: Optional[float] = None
    water_fee: Optional[float] = None
    electricity_fee: Optional[float] = None
    image_url: Optional[str] = None
    qr_code_image: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    floors: List[Floor] = field(default_factory=list)
    amenities: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Renthouse":
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            address=data.get("address"),
            description=data.get("description"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            base_rent=data.get("baseRent"),
            water_fee=data.get("waterFee"),
            electricity_fee=data.get("electricityFee"),
            image_url=data.get("imageUrl"),
            qr_code_image=data.get("qrCodeImage"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            floors=[Floor.from_dict(f) for f in data.get("floors") or []],
            amenities=list(data.get("amenities") or []),
        )

    @property
    def rooms(self) -> List[Room]:
        return [room for floor in self.floors for room in floor.rooms]

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def vacant_rooms(self) -> List[Room]:
        return [room for room in self.rooms if not room.is_occupied]

    def available_rooms_count(self) -> Tuple[int, int]:
        """Return ``(available, total)`` counting rooms marked AVAILABLE."""
        rooms = self.rooms
        return sum(1 for r in rooms if r.is_available), len(rooms)
