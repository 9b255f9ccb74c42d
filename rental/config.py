import os
from pathlib import Path

fleet_file = Path(
    os.getenv("RENTAL_FLEET_FILE", Path(__file__).parent.parent / "fleet.yaml")
)
"""The YAML file the desk is seeded from."""

currency = os.getenv("RENTAL_CURRENCY", "KES")
"""Currency prefix used when displaying amounts."""

secret_key = os.getenv("SECRET_KEY", "dev-secret-key-change-in-prod")
"""The Flask session secret."""
