from .user import User
from .room import Room
from .renthouse import Renthouse, Floor
from .payment import Payment, IncomeReport
from .tenant import Tenant



__all__ = ["User", "Room", "Renthouse", "Floor", "Payment", "IncomeReport", "Tenant"]
