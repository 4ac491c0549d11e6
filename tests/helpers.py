SITE_URL = "https://site.example.org"
PUBLIC_URL = "https://api.example.org"

DAY_MS = 24 * 60 * 60 * 1000
SESSION_MS = 30 * DAY_MS


def landlord_payload(email="a@x.com", password="secret", **profile):
    return {
        "email": email,
        "password": password,
        "role": "Landlord",
        "profile": {"fullName": "A Corp", "numberOfProperties": 3, **profile},
    }


def tenant_profile(**overrides):
    profile = {
        "fullName": "Tina Tenant",
        "currentAddress": "1 High Street",
        "currentIncome": 32000,
        "jobTitle": "Nurse",
        "areaToMove": "Leeds",
        "moveDate": "2026-12-01",
        "smoker": "no",
        "pets": 1,
        "numberOfPeople": 2,
        "summary": "Quiet household",
    }
    profile.update(overrides)
    return profile


def session_from(response) -> str:
    """Session id carried by the response's Set-Cookie header."""
    first = response.headers["set-cookie"].split("; ")[0]
    return first.split("=", 1)[1]


def session_cookie(session_id: str) -> dict:
    return {"Cookie": f"__session={session_id}"}
