"""
Form checks for the pages that post to the API.

Each ``validate_*`` function takes ``request.form`` and returns
``(payload, errors)``: the JSON body for the API (camelCase keys) and a
list of messages to flash. The API validates again; these checks only
spare the user a round trip.
"""

import re

from models.user import ROLES

PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^0\d{8,}$")
MONEY_RE = re.compile(r"^\d+(\.\d{1,2})?$")

PASSWORD_RULES = "Password must contain at least one uppercase letter, one lowercase letter, and one number"


def _text(form, key):
    return (form.get(key) or "").strip()


def _check_password(password, errors):
    if not password:
        errors.append("Password is required")
    elif len(password) < 6:
        errors.append("Password must be at least 6 characters")
    elif not PASSWORD_RE.match(password):
        errors.append(PASSWORD_RULES)


def validate_login(form):
    errors = []
    username = _text(form, "username")
    password = form.get("password") or ""
    if not username:
        errors.append("Username is required")
    _check_password(password, errors)
    return {"username": username, "password": password}, errors


def validate_register(form):
    errors = []
    username = _text(form, "username")
    email = _text(form, "email")
    password = form.get("password") or ""
    confirm = form.get("confirm_password")
    full_name = _text(form, "full_name")
    phone = _text(form, "phone_number")
    role = _text(form, "role").upper()

    if len(username) < 3:
        errors.append("Username must be at least 3 characters")
    if not EMAIL_RE.match(email):
        errors.append("Invalid email address")
    _check_password(password, errors)
    if confirm is not None and confirm != password:
        errors.append("Passwords do not match")
    if not full_name:
        errors.append("Full name is required")
    if phone and not PHONE_RE.match(phone):
        errors.append("Phone number must start with 0 and contain at least 9 digits")
    if role not in ROLES:
        errors.append("Please select a role")

    payload = {
        "username": username,
        "email": email,
        "password": password,
        "fullName": full_name,
        "role": role,
    }
    if phone:
        payload["phoneNumber"] = phone
    return payload, errors


def _float(raw, label, errors, required=True):
    raw = (raw or "").strip()
    if not raw:
        if required:
            errors.append(f"{label} is required")
        return None
    try:
        return float(raw)
    except ValueError:
        errors.append(f"{label} must be a number")
        return None


def _money(form, key, label, errors):
    raw = _text(form, key)
    if not raw:
        errors.append(f"{label} is required")
        return None
    if not MONEY_RE.match(raw):
        errors.append(f"Invalid {label.lower()} format")
        return None
    return raw


def validate_renthouse(form):
    """Create/edit property form. Fees stay strings, as the API expects them."""
    errors = []
    name = _text(form, "name")
    address = _text(form, "address")
    if not name:
        errors.append("Property name is required")
    elif len(name) > 100:
        errors.append("Name too long")
    if not address:
        errors.append("Address is required")

    latitude = _float(form.get("latitude"), "Latitude", errors)
    longitude = _float(form.get("longitude"), "Longitude", errors)
    base_rent = _money(form, "base_rent", "Base rent", errors)
    water_fee = _money(form, "water_fee", "Water fee", errors)
    electricity_fee = _money(form, "electricity_fee", "Electricity fee", errors)

    image_url = _text(form, "image_url")
    qr_code_image = _text(form, "qr_code_image")
    if len(image_url) > 2000:
        errors.append("Image URL too long")
    if len(qr_code_image) > 2000:
        errors.append("QR Code image URL too long")

    payload = {
        "name": name,
        "address": address,
        "description": _text(form, "description") or None,
        "latitude": latitude,
        "longitude": longitude,
        "baseRent": float(base_rent) if base_rent else None,
        "waterFee": water_fee,
        "electricityFee": electricity_fee,
        "imageUrl": image_url or None,
        "qrCodeImage": qr_code_image or None,
    }
    return payload, errors


def validate_floor(form):
    errors = []
    raw = _text(form, "floor_number")
    try:
        floor_number = int(raw)
    except ValueError:
        floor_number = None
    if floor_number is None or floor_number < 1:
        errors.append("Floor number must be positive")
    description = _text(form, "description") or f"Floor {floor_number}"
    return {"floorNumber": floor_number, "description": description}, errors


def validate_room(form):
    errors = []
    room_number = _text(form, "room_number")
    description = _text(form, "description")
    if not room_number:
        errors.append("Room number is required")
    if not description:
        errors.append("Description is required")

    monthly_rent = _float(form.get("monthly_rent"), "Monthly rent", errors)
    deposit = _float(form.get("deposit"), "Security deposit", errors)
    if monthly_rent is not None and monthly_rent < 1:
        errors.append("Monthly rent is required")
    if deposit is not None and deposit < 1:
        errors.append("Security deposit is required")

    payload = {
        "roomNumber": room_number,
        "description": description,
        "monthlyRent": monthly_rent,
        "deposit": deposit,
    }
    return payload, errors


def validate_contact(form):
    errors = []
    name = _text(form, "name")
    email = _text(form, "email")
    subject = _text(form, "subject") or "Contact request"
    message = _text(form, "message")
    if not name:
        errors.append("Name is required")
    if not EMAIL_RE.match(email):
        errors.append("Invalid email address")
    if not message:
        errors.append("Message is required")
    return {"name": name, "email": email, "subject": subject, "message": message}, errors
