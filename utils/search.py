def parse_price_range(price_range):
    """
    Split a ``"min-max"`` select value into bounds.

    An empty side is an open bound, e.g. ``"0-500"``, ``"500-1000"``,
    ``"2000-"``.
    """
    if not price_range or "-" not in price_range:
        return None, None
    min_str, max_str = price_range.split("-", 1)
    return _bound(min_str), _bound(max_str)


def _bound(raw):
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def filter_renthouses(renthouses, name=None, location=None, price_range=None):
    results = list(renthouses)

    if name:
        needle = name.lower()
        results = [r for r in results if needle in r.name.lower()]

    if location:
        needle = location.lower()
        results = [r for r in results if r.address and needle in r.address.lower()]

    if price_range:
        low, high = parse_price_range(price_range)

        def in_range(r):
            if r.base_rent is None:
                return False
            if low is not None and r.base_rent < low:
                return False
            if high is not None and r.base_rent > high:
                return False
            return True

        results = [r for r in results if in_range(r)]

    return results


def favorite_renthouse_ids(favorite_rooms):
    """The API stores favorites per room; a renthouse is a favorite if any of its rooms is."""
    return {room.renthouse_id for room in favorite_rooms or [] if room.renthouse_id is not None}


def favorite_states(renthouses, favorite_rooms):
    ids = favorite_renthouse_ids(favorite_rooms)
    return {r.id: r.id in ids for r in renthouses}


def group_favorites(favorite_rooms):
    """Map renthouse id to its favorite rooms, keeping first-seen order."""
    grouped = {}
    for room in favorite_rooms or []:
        if room.renthouse_id is None:
            continue
        grouped.setdefault(room.renthouse_id, []).append(room)
    return grouped
