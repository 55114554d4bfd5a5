from datetime import date

from conftest import ok, raises, returns
from models import Payment, Renthouse, Room
from services import user as user_service
from services.api import ApiError

RENTHOUSE = Renthouse.from_dict({
    "id": 1, "name": "Sunrise House", "address": "12 Le Loi", "baseRent": 450,
    "floors": [{"id": 10, "floorNumber": 1, "rooms": [
        {"id": 100, "roomNumber": "101", "monthlyRent": 450, "isOccupied": True, "status": "OCCUPIED"},
        {"id": 101, "roomNumber": "102", "monthlyRent": 400, "isOccupied": False, "status": "AVAILABLE"},
    ]}],
})
BOOKED = Room(id=100, room_number="101", monthly_rent=450, renthouse_id=1, renthouse_name="Sunrise House")
THIS_MONTH = date.today().strftime("%Y-%m-01")
PENDING = Payment(id=9, room_id=100, payment_month=THIS_MONTH, total_amount=520, status="UNPAID")
PAID = Payment(id=8, room_id=100, payment_month="2024-01-01", total_amount=500, status="PAID")


def stub_dashboard(monkeypatch, favorites=()):
    monkeypatch.setattr(user_service, "get_featured_renthouses", returns(ok([RENTHOUSE])))
    monkeypatch.setattr(user_service, "get_favorites", returns(ok(list(favorites))))
    monkeypatch.setattr(user_service, "get_current_booking", returns(ok(BOOKED)))
    monkeypatch.setattr(user_service, "get_pending_payments", returns(ok([PENDING])))


def test_dashboard(user_client, monkeypatch):
    stub_dashboard(monkeypatch, favorites=[Room(id=100, room_number="101", renthouse_id=1)])
    resp = user_client.get("/user/dashboard")
    assert resp.status_code == 200
    assert b"Sunrise House" in resp.data
    assert b"1 of 2 rooms available" in resp.data
    assert b"bi-heart-fill" in resp.data
    assert b"$520.00" in resp.data


def test_dashboard_payments_failure_is_quiet(user_client, monkeypatch):
    stub_dashboard(monkeypatch)
    monkeypatch.setattr(user_service, "get_pending_payments", raises(ApiError("Network error")))
    resp = user_client.get("/user/dashboard")
    assert resp.status_code == 200
    assert b"Failed to load payments" in resp.data


def test_renthouse_detail_lists_vacant_rooms(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_renthouse", returns(ok(RENTHOUSE)))
    monkeypatch.setattr(user_service, "is_renthouse_favorite", returns(ok(True)))
    resp = user_client.get("/user/renthouses/1")
    assert b"Room 102" in resp.data
    assert b"Room 101" not in resp.data
    assert b"Saved" in resp.data


def test_book_room(user_client, monkeypatch):
    booked = []
    monkeypatch.setattr(user_service, "book_room", lambda rid: booked.append(rid) or ok(BOOKED))
    resp = user_client.post("/user/rooms/101/book", data={"renthouse_id": "1"})
    assert booked == [101]
    assert resp.headers["Location"].endswith("/user/bookings")


def test_book_room_conflict(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "book_room", raises(ApiError("Room is already occupied", 409)))
    resp = user_client.post("/user/rooms/101/book", data={"renthouse_id": "1"})
    assert resp.headers["Location"].endswith("/user/renthouses/1")
    with user_client.session_transaction() as sess:
        assert ("danger", "Failed to book room. It may have been taken: Room is already occupied") in sess["_flashes"]


def test_toggle_renthouse_favorite(user_client, monkeypatch):
    calls = []
    monkeypatch.setattr(user_service, "add_renthouse_favorite", lambda rid: calls.append(("add", rid)) or ok())
    monkeypatch.setattr(user_service, "remove_renthouse_favorite", lambda rid: calls.append(("remove", rid)) or ok())

    user_client.post("/user/renthouses/1/favorite", data={"favorite": "0"})
    resp = user_client.post("/user/renthouses/1/favorite", data={"favorite": "1", "next": "/search?name=sun"})

    assert calls == [("add", 1), ("remove", 1)]
    assert resp.headers["Location"].endswith("/search?name=sun")


def test_favorite_ignores_external_next(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "add_room_favorite", returns(ok()))
    resp = user_client.post("/user/rooms/5/favorite", data={"favorite": "0", "next": "//evil.example"})
    assert resp.headers["Location"].endswith("/user/favorites")


def test_favorites_grouped_by_renthouse(user_client, monkeypatch):
    rooms = [
        Room(id=100, room_number="101", renthouse_id=1),
        Room(id=101, room_number="102", renthouse_id=1),
        Room(id=300, room_number="1", renthouse_id=3),
    ]
    monkeypatch.setattr(user_service, "get_favorites", returns(ok(rooms)))

    def fake_get_renthouse(rid):
        if rid == 3:
            raise ApiError("Renthouse not found", 404)
        return ok(RENTHOUSE)

    monkeypatch.setattr(user_service, "get_renthouse", fake_get_renthouse)
    resp = user_client.get("/user/favorites")
    assert resp.data.count(b"Sunrise House") >= 1
    assert b"Room 102" in resp.data


def test_favorites_remove_targets_renthouse(user_client, monkeypatch):
    rooms = [Room(id=100, room_number="101", renthouse_id=1), Room(id=101, room_number="102", renthouse_id=1)]
    monkeypatch.setattr(user_service, "get_favorites", returns(ok(rooms)))
    monkeypatch.setattr(user_service, "get_renthouse", returns(ok(RENTHOUSE)))
    resp = user_client.get("/user/favorites")
    assert b'action="/user/renthouses/1/favorite"' in resp.data
    assert b"/user/rooms/100/favorite" not in resp.data


def test_remove_renthouse_from_favorites_page(user_client, monkeypatch):
    removed = []
    monkeypatch.setattr(user_service, "remove_renthouse_favorite", lambda rid: removed.append(rid) or ok())
    monkeypatch.setattr(user_service, "remove_room_favorite", raises(AssertionError("room endpoint called")))
    resp = user_client.post("/user/renthouses/1/favorite", data={"favorite": "1", "next": "/user/favorites"})
    assert removed == [1]
    assert resp.headers["Location"].endswith("/user/favorites")


def test_bookings_enriched_with_renthouse(user_client, monkeypatch):
    calls = []
    monkeypatch.setattr(user_service, "get_bookings", returns(ok([BOOKED, BOOKED])))
    monkeypatch.setattr(user_service, "get_renthouse", lambda rid: calls.append(rid) or ok(RENTHOUSE))
    resp = user_client.get("/user/bookings")
    assert calls == [1]
    assert b"12 Le Loi" in resp.data


def test_room_detail(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_room", returns(ok(BOOKED)))
    monkeypatch.setattr(user_service, "get_room_payments", returns(ok([PENDING, PAID])))
    resp = user_client.get("/user/room/100")
    assert resp.status_code == 200
    assert b"/user/payments/9/qr-code" in resp.data
    assert b"/user/payments/8/qr-code" not in resp.data


def test_payments_tabs(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_payments", returns(ok([PENDING, PAID])))
    monkeypatch.setattr(user_service, "get_pending_payments", returns(ok([PENDING])))

    resp = user_client.get("/user/payments?tab=paid")
    assert b"January 2024" in resp.data
    assert b"$520.00" in resp.data  # amount due card

    resp = user_client.get("/user/payments?tab=pending")
    assert b"January 2024" not in resp.data


def test_payments_by_status(user_client, monkeypatch):
    statuses = []
    monkeypatch.setattr(user_service, "get_payments_by_status", lambda s: statuses.append(s) or ok([PAID]))
    resp = user_client.get("/user/payments/status/paid")
    assert statuses == ["PAID"]
    assert resp.status_code == 200


def test_payment_qr_code(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_payment_qr_code", returns(ok("/uploads/qr.png")))
    resp = user_client.get("/user/payments/9/qr-code")
    assert resp.get_json() == {"success": True, "data": "http://api.test/api/upload/files/qr.png"}


def test_payment_qr_code_failure(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_payment_qr_code", raises(ApiError("Payment not found", 404)))
    resp = user_client.get("/user/payments/9/qr-code")
    assert resp.status_code == 502
    assert resp.get_json()["success"] is False


def test_available_rooms_json(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_available_rooms", returns(ok([RENTHOUSE.rooms[1]])))
    resp = user_client.get("/user/renthouses/1/rooms/available")
    assert resp.get_json()["data"] == [{"id": 101, "roomNumber": "102", "monthlyRent": 400, "deposit": None}]


def test_nearby(user_client, monkeypatch):
    calls = []
    monkeypatch.setattr(user_service, "get_nearby_renthouses",
                        lambda lat, lng, radius: calls.append((lat, lng, radius)) or ok([RENTHOUSE]))
    resp = user_client.get("/user/renthouses/nearby?latitude=21.0&longitude=105.8")
    assert calls == [(21.0, 105.8, 10.0)]
    assert b"Sunrise House" in resp.data


def test_nearby_without_coordinates_skips_api(user_client, monkeypatch):
    monkeypatch.setattr(user_service, "get_nearby_renthouses", raises(AssertionError("API called")))
    resp = user_client.get("/user/renthouses/nearby")
    assert b"Enter coordinates" in resp.data
