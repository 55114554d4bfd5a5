from urllib.parse import urlsplit

from flask import redirect, request


def is_local_url(url):
    if not url:
        return False
    # Browsers treat a backslash after the leading slash as "//"
    url = url.replace("\\", "/")
    if not url.startswith("/") or url.startswith("//"):
        return False
    parts = urlsplit(url)
    return not parts.scheme and not parts.netloc


def safe_redirect(default):
    """Redirect to the posted ``next`` path when it stays on this site, else to ``default``."""
    next_url = request.form.get("next") or request.args.get("next")
    if is_local_url(next_url):
        return redirect(next_url)
    return redirect(default)
