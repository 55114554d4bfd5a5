from datetime import date, datetime

from models.payment import PAYMENT_PAID

DAYS_PER_MONTH = 30

URGENCY_OVERDUE = "overdue"
URGENCY_DUE = "due"
URGENCY_UPCOMING = "upcoming"


def parse_payment_month(value):
    """Return the first day of the month of an API date string, or ``None``."""
    if not value:
        return None
    for fmt, width in (("%Y-%m-%d", 10), ("%Y-%m", 7)):
        try:
            parsed = datetime.strptime(value[:width], fmt)
        except ValueError:
            continue
        return date(parsed.year, parsed.month, 1)
    return None


def format_payment_month(value):
    month = parse_payment_month(value)
    return month.strftime("%B %Y") if month else (value or "")


def urgency_level(payment, today=None):
    """Classify an unpaid payment as overdue, due or upcoming."""
    today = today or date.today()
    current = date(today.year, today.month, 1)
    month = parse_payment_month(payment.payment_month)
    if month is None:
        return URGENCY_DUE

    months_diff = (current - month).days / DAYS_PER_MONTH
    if months_diff > 1:
        return URGENCY_OVERDUE
    if months_diff >= 0:
        return URGENCY_DUE
    return URGENCY_UPCOMING


def total_amount(payments):
    return sum(p.total_amount or 0 for p in payments)


def paid_payments(payments):
    return [p for p in payments if p.status == PAYMENT_PAID]


def payment_stats(payments, pending):
    paid = paid_payments(payments)
    return {
        "total": len(payments),
        "paid": len(paid),
        "unpaid": len(pending),
        "total_amount": total_amount(payments),
        "paid_amount": total_amount(paid),
    }


def month_to_api_date(month_input):
    """``2025-03`` from an ``<input type=month>`` becomes ``2025-03-01``."""
    return f"{month_input}-01"


def build_payment_request(room, form):
    """
    Build the create-payment body from the room detail form.

    Blank optional fees are sent as 0. Raises ``ValueError`` with a message
    suitable for flashing when the form is invalid.
    """
    month = (form.get("payment_month") or "").strip()
    if not month or parse_payment_month(month) is None:
        raise ValueError("Payment month is required")

    room_fee = _fee(form.get("room_fee"), "Room fee", required=True)
    return {
        "roomId": room.id,
        "paymentMonth": month_to_api_date(month[:7]),
        "roomFee": room_fee,
        "electricityFee": _fee(form.get("electricity_fee"), "Electricity fee"),
        "waterFee": _fee(form.get("water_fee"), "Water fee"),
        "otherCharges": _fee(form.get("other_charges"), "Other charges"),
        "otherChargesDescription": (form.get("other_charges_description") or "").strip() or None,
    }


def _fee(raw, label, required=False):
    raw = (raw or "").strip()
    if not raw:
        if required:
            raise ValueError(f"{label} is required")
        return 0
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{label} must be a number")
    if value < 0:
        raise ValueError(f"{label} must be 0 or greater")
    return value
