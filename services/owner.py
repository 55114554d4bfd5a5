"""Owner endpoints: properties, floors, rooms, payments and reporting."""

from extensions import api
from models import Renthouse, Floor, Room, Payment, IncomeReport, Tenant


#-------------------------------------------------------
# Renthouses
def get_renthouses():
    return api.get("/owner/renthouses").convert(Renthouse.from_dict, many=True)


def get_renthouse(renthouse_id):
    return api.get(f"/owner/renthouses/{renthouse_id}").convert(Renthouse.from_dict)


def create_renthouse(data):
    return api.post("/owner/renthouses", json=data).convert(Renthouse.from_dict)


def update_renthouse(renthouse_id, data):
    return api.put(f"/owner/renthouses/{renthouse_id}", json=data).convert(Renthouse.from_dict)


def delete_renthouse(renthouse_id):
    return api.delete(f"/owner/renthouses/{renthouse_id}")


#-------------------------------------------------------
# Floors & rooms
def create_floor(renthouse_id, data):
    return api.post(f"/owner/renthouses/{renthouse_id}/floors", json=data).convert(Floor.from_dict)


def create_room(floor_id, data):
    return api.post(f"/owner/floors/{floor_id}/rooms", json=data).convert(Room.from_dict)


def update_room(room_id, data):
    return api.put(f"/owner/rooms/{room_id}", json=data).convert(Room.from_dict)


def get_rooms():
    return api.get("/owner/rooms").convert(Room.from_dict, many=True)


def get_room(room_id):
    return api.get(f"/owner/rooms/{room_id}").convert(Room.from_dict)


def search_rooms(room_number=None, username=None):
    params = {"roomNumber": room_number, "username": username}
    return api.get("/owner/rooms/search", params=params).convert(Room.from_dict, many=True)


#-------------------------------------------------------
# Payments
def create_payment(data):
    return api.post("/owner/payments", json=data).convert(Payment.from_dict)


def get_payments():
    return api.get("/owner/payments").convert(Payment.from_dict, many=True)


def get_room_payments(room_id):
    return api.get(f"/owner/rooms/{room_id}/payments").convert(Payment.from_dict, many=True)


def update_payment_status(payment_id):
    # The server decides the transition; the client only asks for it.
    return api.put(f"/owner/payments/{payment_id}/status").convert(Payment.from_dict)


#-------------------------------------------------------
# Income, tenants & statistics
def get_monthly_income(year, month):
    params = {"year": year, "month": month}
    return api.get("/owner/income/monthly", params=params).convert(IncomeReport.from_dict)


def get_yearly_income(year):
    return api.get("/owner/income/yearly", params={"year": year}).convert(IncomeReport.from_dict)


def get_tenants():
    return api.get("/owner/tenants").convert(Tenant.from_dict, many=True)


def get_active_rooms_count():
    return api.get("/owner/stats/active-rooms")


def get_pending_payments_count():
    return api.get("/owner/stats/pending-payments")


def get_dashboard_analytics():
    return api.get("/owner/analytics")
