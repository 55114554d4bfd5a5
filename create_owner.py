import os
from app import app
from services import auth as auth_service
from services.api import ApiError

OWNER = {
    "username": os.getenv("OWNER_USERNAME", "owner"),
    "email": os.getenv("OWNER_EMAIL", "owner@example.com"),
    "password": os.getenv("OWNER_PASSWORD", "Owner123"),
    "fullName": "Owner",
    "phoneNumber": "0123456789",
    "role": "OWNER",
}

with app.app_context():
    try:
        resp = auth_service.register(OWNER)
    except ApiError as exc:
        if exc.status_code in (400, 409):
            print(f"⚠️ Owner account not created: {exc.message}")
        else:
            raise
    else:
        if resp.success:
            print(f"Owner account '{OWNER['username']}' created successfully!")
        else:
            print(f"⚠️ Owner account not created: {resp.message}")
