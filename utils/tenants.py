from models.payment import PAYMENT_PAID, PAYMENT_UNPAID, PAYMENT_OVERDUE, PAYMENT_PENDING

UNSETTLED = (PAYMENT_UNPAID, PAYMENT_OVERDUE, PAYMENT_PENDING)

STATUS_LABELS = {
    PAYMENT_PAID: "Paid",
    PAYMENT_UNPAID: "Unpaid",
    PAYMENT_OVERDUE: "Overdue",
    PAYMENT_PENDING: "Pending",
}

# Bootstrap badge class per status
STATUS_BADGES = {
    PAYMENT_PAID: "success",
    PAYMENT_UNPAID: "danger",
    PAYMENT_OVERDUE: "warning",
    PAYMENT_PENDING: "secondary",
}


def status_label(status):
    return STATUS_LABELS.get(status, "Unknown")


def status_badge(status):
    return STATUS_BADGES.get(status, "light")


def filter_tenants(tenants, term):
    if not term:
        return list(tenants)
    needle = term.lower()
    return [
        t for t in tenants
        if needle in t.full_name.lower()
        or needle in t.username.lower()
        or needle in t.email.lower()
        or term in t.room_number
        or needle in t.renthouse_name.lower()
    ]


def tenant_stats(tenants):
    # Unpaid is estimated from the monthly rent of tenants with an open bill.
    return {
        "total_tenants": len(tenants),
        "total_paid": sum(t.total_paid or 0 for t in tenants),
        "total_unpaid": sum(t.monthly_rent or 0 for t in tenants if t.payment_status in UNSETTLED),
    }


def filter_rooms(rooms, term):
    if not term:
        return list(rooms)
    needle = term.lower()
    return [
        r for r in rooms
        if needle in r.room_number.lower()
        or needle in (r.description or "").lower()
        or needle in (r.renter_full_name or "").lower()
        or needle in (r.renter_username or "").lower()
    ]
