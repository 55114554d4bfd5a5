from extensions import api


def login(username, password):
    return api.post("/auth/login", json={"username": username, "password": password})


def register(data):
    """``data`` keys: username, email, password, fullName, phoneNumber, role."""
    return api.post("/auth/register", json=data)
