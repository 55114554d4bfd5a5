from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app, send_file, abort
from flask_login import current_user
from services import owner as owner_service
from services import upload as upload_service
from services.api import ApiError, ApiUnauthorized
from services.upload import UploadRejected
from utils.analytics import monthly_income_series, tenant_distribution, dashboard_summary
from utils.exports import owner_workbook, payment_receipt, XLSX_MIMETYPE, DOCX_MIMETYPE
from utils.fetching import fetch, mutate
from utils.images import get_image_url
from utils.redirects import safe_redirect
from utils.payments import build_payment_request, total_amount, paid_payments
from utils.tenants import filter_tenants, tenant_stats, filter_rooms, status_label, status_badge
from utils.validation import validate_renthouse, validate_floor, validate_room
from datetime import datetime

owner_bp = Blueprint("owner", __name__, template_folder="../../templates/owner")

# Only owners get past this point
@owner_bp.before_request
def restrict_to_owner():
    if not current_user.is_authenticated:
        flash("Please log in to continue.", "info")
        return redirect(url_for("auth.login"))
    if not current_user.is_owner:
        return redirect(url_for("user.dashboard"))


@owner_bp.app_template_global()
def payment_status_label(status):
    return status_label(status)


@owner_bp.app_template_global()
def payment_status_badge(status):
    return status_badge(status)

#-------------------------------------------------------
# Dashboard
@owner_bp.route("/dashboard")
def dashboard():
    result = fetch(owner_service.get_dashboard_analytics)
    analytics = result.data or {}

    return render_template(
        "owner/dashboard.html",
        error=result.error,
        summary=dashboard_summary(analytics),
        monthly_income=monthly_income_series(analytics),
        tenants_by_status=tenant_distribution(analytics),
    )

# Excel export of the portfolio
@owner_bp.route("/dashboard/export_excel")
def export_dashboard_excel():
    analytics = owner_service.get_dashboard_analytics().data or {}
    payments = owner_service.get_payments().data or []
    tenants = owner_service.get_tenants().data or []

    output = owner_workbook(dashboard_summary(analytics), payments, tenants)
    filename = f"Renthouse_report_{datetime.now().strftime('%Y-%m-%d_%H-%M')}.xlsx"

    return send_file(
        output,
        as_attachment=True,
        download_name=filename,
        mimetype=XLSX_MIMETYPE
    )

#-------------------------------------------------------
# Properties
@owner_bp.route("/renthouses")
def renthouses():
    result = fetch(owner_service.get_renthouses)
    return render_template("owner/renthouses.html", renthouses=result.data or [], error=result.error)


def upload_form_image(field):
    """Forward an optional image field to the API; returns the stored path or None."""
    fileobj = request.files.get(field)
    if not fileobj or not fileobj.filename:
        return None
    try:
        resp = upload_service.upload_image(fileobj)
    except UploadRejected as exc:
        flash(str(exc), "danger")
        return None
    except ApiUnauthorized:
        raise
    except ApiError as exc:
        flash(exc.message or "Failed to upload image", "danger")
        return None
    if not resp.success or not resp.data:
        flash(resp.message or "Failed to upload image", "danger")
        return None
    flash("Image uploaded successfully!", "success")
    return resp.data


# Create / edit property
@owner_bp.route("/renthouses/new", methods=["GET", "POST"])
@owner_bp.route("/renthouses/<int:renthouse_id>/edit", methods=["GET", "POST"])
def edit_renthouse(renthouse_id=None):
    renthouse = None
    if renthouse_id:
        result = fetch(owner_service.get_renthouse, renthouse_id)
        if result.data is None:
            return redirect(url_for("owner.renthouses"))
        renthouse = result.data

    if request.method == "POST":
        form = request.form.to_dict()
        image_url = upload_form_image("image_file")
        if image_url:
            form["image_url"] = image_url
        qr_code_image = upload_form_image("qr_code_file")
        if qr_code_image:
            form["qr_code_image"] = qr_code_image

        payload, errors = validate_renthouse(form)
        if errors:
            for message in errors:
                flash(message, "danger")
            return render_template("owner/edit_renthouse.html", renthouse=renthouse, form=form), 400

        if renthouse:
            result = mutate(owner_service.update_renthouse, renthouse.id, payload,
                            success="Property updated successfully!", failure="Failed to update property")
        else:
            result = mutate(owner_service.create_renthouse, payload,
                            success="Property created successfully!", failure="Failed to create property")
        if not result.ok:
            return render_template("owner/edit_renthouse.html", renthouse=renthouse, form=form), 400
        return redirect(url_for("owner.renthouses"))

    form = {}
    if renthouse:
        form = {
            "name": renthouse.name,
            "address": renthouse.address or "",
            "description": renthouse.description or "",
            "latitude": renthouse.latitude if renthouse.latitude is not None else "",
            "longitude": renthouse.longitude if renthouse.longitude is not None else "",
            "base_rent": renthouse.base_rent if renthouse.base_rent is not None else "",
            "water_fee": renthouse.water_fee if renthouse.water_fee is not None else "",
            "electricity_fee": renthouse.electricity_fee if renthouse.electricity_fee is not None else "",
            "image_url": renthouse.image_url or "",
            "qr_code_image": renthouse.qr_code_image or "",
        }
    return render_template("owner/edit_renthouse.html", renthouse=renthouse, form=form)


# Property detail: floors, rooms, occupancy
@owner_bp.route("/renthouses/<int:renthouse_id>")
def renthouse_detail(renthouse_id):
    result = fetch(owner_service.get_renthouse, renthouse_id)
    if result.data is None:
        return redirect(url_for("owner.renthouses"))

    renthouse = result.data
    rooms = renthouse.rooms
    occupied = sum(1 for r in rooms if r.is_occupied)
    base = current_app.config["API_BASE_URL"]

    return render_template(
        "owner/renthouse_detail.html",
        renthouse=renthouse,
        occupied=occupied,
        vacant=len(rooms) - occupied,
        monthly_revenue=sum(r.monthly_rent or 0 for r in rooms if r.is_occupied),
        image_preview=get_image_url(renthouse.image_url, base),
        qr_preview=get_image_url(renthouse.qr_code_image, base) if renthouse.qr_code_image else None,
    )


@owner_bp.route("/renthouses/<int:renthouse_id>/delete", methods=["POST"])
def delete_renthouse(renthouse_id):
    mutate(owner_service.delete_renthouse, renthouse_id,
           success="Property deleted.", failure="Failed to delete property")
    return redirect(url_for("owner.renthouses"))

#-------------------------------------------------------
# Floors & rooms
@owner_bp.route("/renthouses/<int:renthouse_id>/floors", methods=["POST"])
def create_floor(renthouse_id):
    payload, errors = validate_floor(request.form)
    if errors:
        for message in errors:
            flash(message, "danger")
    else:
        mutate(owner_service.create_floor, renthouse_id, payload,
               success="Floor created successfully!", failure="Failed to create floor")
    return redirect(url_for("owner.renthouse_detail", renthouse_id=renthouse_id))


@owner_bp.route("/floors/<int:floor_id>/rooms", methods=["POST"])
def create_room(floor_id):
    renthouse_id = request.form.get("renthouse_id", type=int)
    payload, errors = validate_room(request.form)
    if errors:
        for message in errors:
            flash(message, "danger")
    else:
        mutate(owner_service.create_room, floor_id, payload,
               success="Room created successfully!", failure="Failed to create room")

    if renthouse_id:
        return redirect(url_for("owner.renthouse_detail", renthouse_id=renthouse_id))
    return redirect(url_for("owner.rooms"))


@owner_bp.route("/rooms/<int:room_id>/edit", methods=["POST"])
def edit_room(room_id):
    payload, errors = validate_room(request.form)
    if errors:
        for message in errors:
            flash(message, "danger")
    else:
        mutate(owner_service.update_room, room_id, payload,
               success="Room updated successfully!", failure="Failed to update room")

    return safe_redirect(url_for("owner.room_detail", room_id=room_id))


@owner_bp.route("/rooms")
def rooms():
    q = request.args.get("q", "").strip()
    room_number = request.args.get("room_number", "").strip()
    username = request.args.get("username", "").strip()

    if room_number or username:
        result = fetch(owner_service.search_rooms, room_number=room_number or None, username=username or None)
    else:
        result = fetch(owner_service.get_rooms)

    all_rooms = result.data or []
    return render_template(
        "owner/rooms.html",
        rooms=filter_rooms(all_rooms, q),
        total=len(all_rooms),
        q=q,
        room_number=room_number,
        username=username,
        error=result.error,
    )

# Room detail with its payments
@owner_bp.route("/room/<int:room_id>")
def room_detail(room_id):
    result = fetch(owner_service.get_room, room_id)
    if result.data is None:
        return redirect(url_for("owner.rooms"))

    room = result.data
    payments = fetch(owner_service.get_room_payments, room_id).data or []

    return render_template(
        "owner/room_detail.html",
        room=room,
        payments=payments,
        paid_total=total_amount(paid_payments(payments)),
        current_month=datetime.now().strftime("%Y-%m"),
    )


@owner_bp.route("/room/<int:room_id>/payments", methods=["POST"])
def create_payment(room_id):
    result = fetch(owner_service.get_room, room_id)
    if result.data is None:
        return redirect(url_for("owner.rooms"))

    room = result.data
    if not room.can_bill:
        flash("Cannot create payment: Room is not occupied", "danger")
        return redirect(url_for("owner.room_detail", room_id=room_id))

    try:
        payload = build_payment_request(room, request.form)
    except ValueError as exc:
        flash(str(exc), "danger")
        return redirect(url_for("owner.room_detail", room_id=room_id))

    mutate(owner_service.create_payment, payload,
           success="Payment created successfully", failure="Failed to create payment")
    return redirect(url_for("owner.room_detail", room_id=room_id))


@owner_bp.route("/payments/<int:payment_id>/mark_paid", methods=["POST"])
def mark_payment_paid(payment_id):
    room_id = request.form.get("room_id", type=int)
    mutate(owner_service.update_payment_status, payment_id,
           success="Payment marked as paid successfully", failure="Failed to update payment status")
    if room_id:
        return redirect(url_for("owner.room_detail", room_id=room_id))
    return redirect(url_for("owner.payments"))


# Payment receipt (.docx)
@owner_bp.route("/room/<int:room_id>/payments/<int:payment_id>/receipt")
def payment_receipt_docx(room_id, payment_id):
    room = owner_service.get_room(room_id).data
    payments = owner_service.get_room_payments(room_id).data or []
    payment = next((p for p in payments if p.id == payment_id), None)
    if payment is None:
        abort(404)

    buffer = payment_receipt(payment, room)
    filename = f"Receipt_{room.room_number if room else room_id}_{payment.payment_month[:7]}.docx"
    return send_file(buffer, as_attachment=True, download_name=filename, mimetype=DOCX_MIMETYPE)

#-------------------------------------------------------
# Payments & income
@owner_bp.route("/payments")
def payments():
    status = request.args.get("status", "all")
    result = fetch(owner_service.get_payments)
    all_payments = result.data or []

    if status == "paid":
        shown = [p for p in all_payments if p.is_paid]
    elif status == "unpaid":
        shown = [p for p in all_payments if not p.is_paid]
    else:
        shown = all_payments

    return render_template(
        "owner/payments.html",
        payments=shown,
        current_status=status,
        total=total_amount(all_payments),
        paid_total=total_amount(paid_payments(all_payments)),
        error=result.error,
    )


@owner_bp.route("/income")
def income():
    now = datetime.now()
    year = request.args.get("year", type=int) or now.year
    month = request.args.get("month", type=int)

    if month:
        result = fetch(owner_service.get_monthly_income, year, month)
    else:
        result = fetch(owner_service.get_yearly_income, year)

    active_rooms = fetch(owner_service.get_active_rooms_count, quiet=True).data
    pending_count = fetch(owner_service.get_pending_payments_count, quiet=True).data

    return render_template(
        "owner/income.html",
        report=result.data,
        error=result.error,
        selected_year=year,
        selected_month=month,
        months=list(range(1, 13)),
        years=list(range(2020, now.year + 2)),
        active_rooms=active_rooms or 0,
        pending_count=pending_count or 0,
    )

#-------------------------------------------------------
# Tenants
@owner_bp.route("/tenants")
def tenants():
    q = request.args.get("q", "").strip()
    result = fetch(owner_service.get_tenants)
    all_tenants = result.data or []

    return render_template(
        "owner/tenants.html",
        tenants=filter_tenants(all_tenants, q),
        stats=tenant_stats(all_tenants),
        q=q,
        error=result.error,
    )
