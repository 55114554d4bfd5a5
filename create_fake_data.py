import os
import random
from datetime import date
from app import app
from extensions import api
from services import auth as auth_service

# ====== CONFIG ======
NUM_RENTHOUSES = 3
FLOORS_PER_HOUSE = (2, 4)
ROOMS_PER_FLOOR = (3, 6)
OWNER_USERNAME = os.getenv("OWNER_USERNAME", "owner")
OWNER_PASSWORD = os.getenv("OWNER_PASSWORD", "Owner123")
# =====================

STREETS = ["Nguyen Trai", "Le Loi", "Tran Hung Dao", "Hai Ba Trung", "Ly Thuong Kiet", "Cau Giay"]
NAMES = ["Sunrise House", "Green Garden", "River View", "City Nest", "Maple Residence", "Lotus Home"]


def login_owner():
    resp = auth_service.login(OWNER_USERNAME, OWNER_PASSWORD)
    if not resp.success or not resp.data:
        raise SystemExit(f"Cannot log in as {OWNER_USERNAME}: {resp.message}")
    return resp.data["token"]


def create_renthouses(token):
    print("🏠 Creating renthouses...")

    created = []
    for name in random.sample(NAMES, NUM_RENTHOUSES):
        payload = {
            "name": name,
            "address": f"{random.randint(1, 300)} {random.choice(STREETS)}, Hanoi",
            "description": f"{name} near the city centre",
            "latitude": round(21.0 + random.uniform(-0.05, 0.05), 6),
            "longitude": round(105.8 + random.uniform(-0.05, 0.05), 6),
            "baseRent": float(random.choice([300, 450, 600, 800, 1200])),
            "waterFee": str(random.choice([5, 8, 10])),
            "electricityFee": str(random.choice([0.15, 0.2, 0.25])),
            "imageUrl": "",
            "qrCodeImage": "",
        }
        resp = api.request("POST", "/owner/renthouses", json=payload, token=token)
        created.append(resp.data)

    print(f"✅ Created {len(created)} renthouses.")
    return created


def create_floors_and_rooms(token, renthouse):
    floors = rooms = 0
    for floor_number in range(1, random.randint(*FLOORS_PER_HOUSE) + 1):
        floor = api.request(
            "POST",
            f"/owner/renthouses/{renthouse['id']}/floors",
            json={"floorNumber": floor_number, "description": f"Floor {floor_number}"},
            token=token,
        ).data
        floors += 1

        for index in range(1, random.randint(*ROOMS_PER_FLOOR) + 1):
            rent = renthouse.get("baseRent") or 500
            api.request(
                "POST",
                f"/owner/floors/{floor['id']}/rooms",
                json={
                    "roomNumber": f"{floor_number}{index:02d}",
                    "description": random.choice(["Single room", "Double room", "Studio", "Room with balcony"]),
                    "monthlyRent": float(rent + random.choice([0, 50, 100])),
                    "deposit": float(rent),
                },
                token=token,
            )
            rooms += 1
    return floors, rooms


if __name__ == "__main__":
    with app.app_context():
        print(f"🚀 Seeding fake data ({date.today()})...\n")

        token = login_owner()
        renthouses = create_renthouses(token)
        for renthouse in renthouses:
            floors, rooms = create_floors_and_rooms(token, renthouse)
            print(f"✅ {renthouse['name']}: {floors} floors, {rooms} rooms.")

        print("\n🎉 Fake data created!")
