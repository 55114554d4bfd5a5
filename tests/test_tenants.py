from models import Room, Tenant
from utils.tenants import filter_rooms, filter_tenants, status_badge, status_label, tenant_stats


def tenant(id, name, status, rent=300, paid=0, room="101", house="Sunrise"):
    return Tenant(
        id=id, username=name.lower(), full_name=name, email=f"{name.lower()}@x.io",
        room_id=id, room_number=room, renthouse_name=house,
        monthly_rent=rent, total_paid=paid, payment_status=status,
    )


TENANTS = [
    tenant(1, "Anna", "PAID", paid=900),
    tenant(2, "Binh", "UNPAID", rent=400, room="202"),
    tenant(3, "Chi", "OVERDUE", rent=350, house="River View"),
    tenant(4, "Dung", "PENDING", rent=250, paid=250),
]


def test_filter_tenants():
    assert [t.id for t in filter_tenants(TENANTS, "binh")] == [2]
    assert [t.id for t in filter_tenants(TENANTS, "202")] == [2]
    assert [t.id for t in filter_tenants(TENANTS, "river")] == [3]
    assert len(filter_tenants(TENANTS, "")) == 4


def test_tenant_stats():
    assert tenant_stats(TENANTS) == {"total_tenants": 4, "total_paid": 1150, "total_unpaid": 1000}


def test_status_labels():
    assert status_label("OVERDUE") == "Overdue"
    assert status_badge("PAID") == "success"
    assert status_label(None) == "Unknown"


def test_filter_rooms_matches_renter():
    rooms = [
        Room(id=1, room_number="101", description="Balcony", renter_full_name="Anna Le"),
        Room(id=2, room_number="102", renter_username="binh"),
    ]
    assert [r.id for r in filter_rooms(rooms, "anna")] == [1]
    assert [r.id for r in filter_rooms(rooms, "BINH")] == [2]
    assert [r.id for r in filter_rooms(rooms, "balc")] == [1]
