MONTH_NAMES = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]


def monthly_income_series(analytics):
    """Twelve ``{"name", "income"}`` points, JAN to DEC, zero where the API is silent."""
    months = {i + 1: {"name": name, "income": 0} for i, name in enumerate(MONTH_NAMES)}

    for item in (analytics or {}).get("monthlyIncome") or []:
        month = item.get("month")
        if month in months and item.get("name") and item.get("income") is not None:
            months[month] = {"name": item["name"], "income": item["income"]}

    def order(point):
        name = point["name"]
        return MONTH_NAMES.index(name) if name in MONTH_NAMES else len(MONTH_NAMES)

    return sorted(months.values(), key=order)


def tenant_distribution(analytics):
    stats = (analytics or {}).get("tenantStats") or {}
    return [
        {"name": item.get("name"), "value": item.get("value")}
        for item in stats.get("distribution") or []
    ]


def dashboard_summary(analytics):
    summary = (analytics or {}).get("summary") or {}
    return {
        "total_properties": summary.get("totalProperties") or 0,
        "active_rooms": summary.get("activeRooms") or 0,
        "total_year_income": summary.get("totalYearIncome") or 0,
        "pending_payments": summary.get("pendingPayments") or 0,
    }
