"""Tenant endpoints: browsing, favorites, bookings and payments."""

from extensions import api
from models import Renthouse, Room, Payment


#-------------------------------------------------------
# Renthouses & rooms
def get_featured_renthouses():
    return api.get("/user/renthouses/featured").convert(Renthouse.from_dict, many=True)


def get_nearby_renthouses(latitude, longitude, radius_km=10.0):
    params = {"latitude": latitude, "longitude": longitude, "radiusKm": radius_km}
    return api.get("/user/renthouses/nearby", params=params).convert(Renthouse.from_dict, many=True)


def search_renthouses(name=None, location=None, min_price=None, max_price=None):
    params = {"name": name, "location": location, "minPrice": min_price, "maxPrice": max_price}
    return api.get("/user/renthouses/search", params=params).convert(Renthouse.from_dict, many=True)


def get_renthouse(renthouse_id):
    return api.get(f"/user/renthouses/{renthouse_id}").convert(Renthouse.from_dict)


def get_room(room_id):
    return api.get(f"/user/rooms/{room_id}").convert(Room.from_dict)


def get_room_payments(room_id):
    return api.get(f"/user/rooms/{room_id}/payments").convert(Payment.from_dict, many=True)


def get_available_rooms(renthouse_id):
    return api.get(f"/user/renthouses/{renthouse_id}/rooms/available").convert(Room.from_dict, many=True)


def book_room(room_id):
    return api.post(f"/user/rooms/{room_id}/book").convert(Room.from_dict)


#-------------------------------------------------------
# Favorites
def add_room_favorite(room_id):
    return api.post(f"/user/favorites/{room_id}")


def remove_room_favorite(room_id):
    return api.delete(f"/user/favorites/{room_id}")


def add_renthouse_favorite(renthouse_id):
    return api.post(f"/user/renthouses/{renthouse_id}/favorites")


def remove_renthouse_favorite(renthouse_id):
    return api.delete(f"/user/renthouses/{renthouse_id}/favorites")


def is_renthouse_favorite(renthouse_id):
    return api.get(f"/user/renthouses/{renthouse_id}/favorites/check")


def get_favorites():
    return api.get("/user/favorites").convert(Room.from_dict, many=True)


#-------------------------------------------------------
# Bookings
def get_current_booking():
    return api.get("/user/booking/current").convert(Room.from_dict)


def get_bookings():
    return api.get("/user/bookings/all").convert(Room.from_dict, many=True)


#-------------------------------------------------------
# Payments
def get_payments():
    return api.get("/user/payments").convert(Payment.from_dict, many=True)


def get_pending_payments():
    return api.get("/user/payments/pending").convert(Payment.from_dict, many=True)


def get_payments_by_status(status):
    return api.get(f"/user/payments/status/{status}").convert(Payment.from_dict, many=True)


def get_payment_qr_code(payment_id):
    return api.get(f"/user/payments/{payment_id}/qr-code")
