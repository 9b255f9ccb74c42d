"""Generators for reservation codes, registration tags and starting mileage."""

import random
import time
from typing import Callable, Optional


def _millis() -> int:
    return int(time.time() * 1000)


class CodeGenerator:
    """
    Produces identifiers from an injectable clock and random source.

    Reservation codes look like ``RES-1704067200000-42``. They are not
    checked for uniqueness here; the ledger rejects codes it has issued before.
    """

    prefix = "RES"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.rng = rng or random.Random()
        self.clock = clock or _millis

    def next_code(self) -> str:
        """Generate a reservation code from the clock and a number in 0..999."""
        return f"{self.prefix}-{self.clock()}-{self.rng.randrange(1000)}"

    def registration_tag(self) -> str:
        """Generate a registration tag such as ``KAA-123X``."""
        return f"KAA-{self.rng.randrange(1000)}X"

    def starting_mileage(self) -> int:
        """Random odometer reading in [0, 50000)."""
        return self.rng.randrange(50000)
