from flask import Blueprint, render_template, redirect, url_for, flash, request, jsonify, current_app
from flask_login import current_user
from services import user as user_service
from services.api import ApiError, ApiUnauthorized
from utils.fetching import fetch, mutate
from utils.images import get_image_url
from utils.redirects import safe_redirect
from utils.payments import urgency_level, payment_stats, paid_payments, total_amount
from utils.search import favorite_states, group_favorites

user_bp = Blueprint("user", __name__, template_folder="../../templates/user")

# Tenants only; owners are sent to their own dashboard
@user_bp.before_request
def restrict_to_user():
    if not current_user.is_authenticated:
        flash("Please log in to continue.", "info")
        return redirect(url_for("auth.login"))
    if current_user.is_owner:
        return redirect(url_for("owner.dashboard"))


@user_bp.app_template_global()
def payment_urgency(payment):
    return urgency_level(payment)


#-------------------------------------------------------
# Dashboard
@user_bp.route("/dashboard")
def dashboard():
    featured = fetch(user_service.get_featured_renthouses)
    favorites = fetch(user_service.get_favorites, quiet=True)
    booking = fetch(user_service.get_current_booking, quiet=True)
    pending = fetch(user_service.get_pending_payments, quiet=True)

    renthouses = featured.data or []
    favorite_rooms = favorites.data or []

    return render_template(
        "user/dashboard.html",
        renthouses=renthouses,
        error=featured.error,
        favorites=favorite_states(renthouses, favorite_rooms),
        favorite_count=len(group_favorites(favorite_rooms)),
        active_booking=booking.data,
        pending_payments=pending.data or [],
        payments_error=pending.error,
    )

#-------------------------------------------------------
# Browsing
@user_bp.route("/renthouses/<int:renthouse_id>")
def renthouse_detail(renthouse_id):
    result = fetch(user_service.get_renthouse, renthouse_id)
    if result.data is None:
        return redirect(url_for("user.dashboard"))

    renthouse = result.data
    favorite = fetch(user_service.is_renthouse_favorite, renthouse_id, quiet=True).data

    return render_template(
        "user/renthouse_detail.html",
        renthouse=renthouse,
        vacant_rooms=renthouse.vacant_rooms,
        is_favorite=bool(favorite),
    )


@user_bp.route("/renthouses/nearby")
def nearby():
    latitude = request.args.get("latitude", type=float)
    longitude = request.args.get("longitude", type=float)
    radius_km = request.args.get("radius_km", type=float) or 10.0

    renthouses, error = [], None
    if latitude is not None and longitude is not None:
        result = fetch(user_service.get_nearby_renthouses, latitude, longitude, radius_km)
        renthouses, error = result.data or [], result.error

    return render_template(
        "user/nearby.html",
        renthouses=renthouses,
        error=error,
        latitude=latitude,
        longitude=longitude,
        radius_km=radius_km,
    )


@user_bp.route("/renthouses/<int:renthouse_id>/rooms/available")
def available_rooms(renthouse_id):
    result = fetch(user_service.get_available_rooms, renthouse_id, quiet=True)
    if not result.ok:
        return jsonify({"success": False, "message": result.error}), 502
    return jsonify({
        "success": True,
        "data": [
            {"id": r.id, "roomNumber": r.room_number, "monthlyRent": r.monthly_rent, "deposit": r.deposit}
            for r in result.data or []
        ],
    })


@user_bp.route("/room/<int:room_id>")
def room_detail(room_id):
    result = fetch(user_service.get_room, room_id)
    if result.data is None:
        return redirect(url_for("user.bookings"))

    payments = fetch(user_service.get_room_payments, room_id).data or []
    return render_template("user/room_detail.html", room=result.data, payments=payments)


@user_bp.route("/rooms/<int:room_id>/book", methods=["POST"])
def book_room(room_id):
    renthouse_id = request.form.get("renthouse_id", type=int)
    # Occupancy is decided by the API; a lost race comes back as an error.
    result = mutate(user_service.book_room, room_id,
                    success="Room booked successfully!",
                    failure="Failed to book room. It may have been taken")
    if result.ok:
        return redirect(url_for("user.bookings"))
    if renthouse_id:
        return redirect(url_for("user.renthouse_detail", renthouse_id=renthouse_id))
    return redirect(url_for("user.dashboard"))

#-------------------------------------------------------
# Favorites
@user_bp.route("/renthouses/<int:renthouse_id>/favorite", methods=["POST"])
def toggle_renthouse_favorite(renthouse_id):
    if request.form.get("favorite") == "1":
        mutate(user_service.remove_renthouse_favorite, renthouse_id,
               success="Removed from favorites", failure="Failed to remove from favorites")
    else:
        mutate(user_service.add_renthouse_favorite, renthouse_id,
               success="Added to favorites", failure="Failed to add to favorites")
    return safe_redirect(url_for("user.renthouse_detail", renthouse_id=renthouse_id))


@user_bp.route("/rooms/<int:room_id>/favorite", methods=["POST"])
def toggle_room_favorite(room_id):
    if request.form.get("favorite") == "1":
        mutate(user_service.remove_room_favorite, room_id,
               success="Removed from favorites", failure="Failed to remove from favorites")
    else:
        mutate(user_service.add_room_favorite, room_id,
               success="Added to favorites", failure="Failed to add to favorites")
    return safe_redirect(url_for("user.favorites"))


@user_bp.route("/favorites")
def favorites():
    result = fetch(user_service.get_favorites)
    grouped = group_favorites(result.data or [])

    entries = []
    for renthouse_id, rooms in grouped.items():
        try:
            resp = user_service.get_renthouse(renthouse_id)
        except ApiUnauthorized:
            raise
        except ApiError:
            # One missing property should not hide the others
            continue
        if resp.success and resp.data:
            entries.append({"renthouse": resp.data, "rooms": rooms})

    return render_template("user/favorites.html", entries=entries, error=result.error)

#-------------------------------------------------------
# Bookings
@user_bp.route("/bookings")
def bookings():
    result = fetch(user_service.get_bookings)
    renthouses = {}
    booked = []
    for room in result.data or []:
        renthouse = None
        if room.renthouse_id is not None:
            if room.renthouse_id not in renthouses:
                renthouses[room.renthouse_id] = fetch(user_service.get_renthouse, room.renthouse_id, quiet=True).data
            renthouse = renthouses[room.renthouse_id]
        booked.append({"room": room, "renthouse": renthouse})

    return render_template("user/bookings.html", bookings=booked, error=result.error)

#-------------------------------------------------------
# Payments
@user_bp.route("/payments")
def payments():
    tab = request.args.get("tab", "all")
    result = fetch(user_service.get_payments)
    pending = fetch(user_service.get_pending_payments, quiet=True).data or []

    all_payments = result.data or []
    paid = paid_payments(all_payments)

    if tab == "pending":
        shown = pending
    elif tab == "paid":
        shown = paid
    else:
        shown = all_payments

    return render_template(
        "user/payments.html",
        payments=shown,
        tab=tab,
        stats=payment_stats(all_payments, pending) if result.ok else None,
        pending_total=total_amount(pending),
        error=result.error,
    )


@user_bp.route("/payments/status/<string:status>")
def payments_by_status(status):
    result = fetch(user_service.get_payments_by_status, status.upper())
    return render_template(
        "user/payments.html",
        payments=result.data or [],
        tab=status.lower(),
        stats=None,
        pending_total=0,
        error=result.error,
    )


@user_bp.route("/payments/<int:payment_id>/qr-code")
def payment_qr_code(payment_id):
    result = fetch(user_service.get_payment_qr_code, payment_id, quiet=True)
    if not result.ok:
        return jsonify({"success": False, "message": result.error or "Failed to load QR code"}), 502
    return jsonify({"success": True, "data": get_image_url(result.data, current_app.config["API_BASE_URL"])})
