# tests/helpers.py
"""Request payload builders shared by the test modules."""

from datetime import date

TEST_PASSWORD = "test-shared-password"


def van_payload(**overrides):
    payload = {
        "vin": "11111111111111111",
        "matricula": "AAA-0001",
        "model": "Sprinter",
        "van_type": "Furgón",
        "company": "Acme",
        "state": "Operativa",
    }
    payload.update(overrides)
    return payload


def breakdown_payload(van_id, **overrides):
    payload = {
        "van_id": van_id,
        "cause": "Embrague",
        "breakdown_date": date.today().isoformat(),
    }
    payload.update(overrides)
    return payload
