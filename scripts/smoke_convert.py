"""Smoke script for the conversion flow.

Runs the form sequence against an in-process app:
 1. Edit a price and add a package.
 2. Convert with hundredth rounding, then with whole-unit rounding.
 3. Trigger the empty-currency error and show the previous result survives.

Uses the 'static' provider by default; pass --live to hit the real API.
NOTE: This is a lightweight diagnostic and not a formal test.
"""

import json
import sys

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def run(live: bool = False):
    settings = Settings(exchange_rate_provider="exchangerate-api" if live else "static")
    settings.init_post_load()
    client = TestClient(create_app(settings_override=settings))
    out = {}

    client.put("/catalog/starter", json={"value": "100"})
    client.post("/catalog/", json={"name": "agency"})
    client.put("/catalog/agency", json={"value": 749})

    out["hundredths"] = client.post(
        "/conversions/", json={"currencies": "EUR, gbp, xyz", "round_numbers": False}
    ).json()
    out["whole"] = client.post(
        "/conversions/", json={"currencies": "EUR, gbp", "round_numbers": True}
    ).json()
    out["empty"] = client.post("/conversions/", json={"currencies": " , "}).json()
    out["state_after_error"] = client.get("/conversions/state").json()

    print(json.dumps(out, indent=2))
    print(client.get("/conversions/latest/export").text)


if __name__ == "__main__":
    run(live="--live" in sys.argv)
