from urllib.parse import urlsplit

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=400&h=300&fit=crop"


def api_host(api_base_url: str) -> str:
    # Only a trailing /api path segment is dropped; the host is kept as is.
    parts = urlsplit(api_base_url.rstrip("/"))
    path = parts.path[:-len("/api")] if parts.path.endswith("/api") else parts.path
    return f"{parts.scheme}://{parts.netloc}{path}"


def get_image_url(image_url, api_base_url: str) -> str:
    """Resolve an image path stored by the API into a URL the browser can load."""
    if not image_url:
        return PLACEHOLDER_IMAGE
    if image_url.startswith("http"):
        return image_url
    if image_url.startswith("/api/upload/files/"):
        return f"{api_host(api_base_url)}{image_url}"
    if image_url.startswith("/uploads/") or "/" not in image_url:
        filename = image_url.replace("/uploads/", "", 1)
        return f"{api_base_url.rstrip('/')}/upload/files/{filename}"
    return image_url
