"""YAML loading utilities for fleet seed data."""

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from .desk import RentalDesk
from .errors import SeedError
from .status import VehicleStatus

logger = logging.getLogger(__name__)

SCHEMA_FILE = Path(__file__).parent / "schema.yaml"


def load_schema() -> Dict[str, Any]:
    """Load the seed file JSON schema shipped with the package."""
    with open(SCHEMA_FILE) as f:
        return yaml.safe_load(f)


def _describe(error: jsonschema.ValidationError) -> str:
    where = ".".join(str(p) for p in error.path) or "top level"
    return f"Invalid seed data at {where}: {error.message}"


def _read_seed(filename: Union[str, Path]) -> Any:
    try:
        with open(filename, "rb") as fp:
            return yaml.load(fp, Loader=yaml.SafeLoader)
    except OSError as e:
        raise SeedError(f"Cannot read seed file {filename}: {e}") from e
    except yaml.YAMLError as e:
        raise SeedError(f"YAML parse error in {filename}: {e}") from e


def validate_seed_data(data: Any, schema: Optional[Dict[str, Any]] = None) -> None:
    """
    Check parsed seed data against the schema.

    :raises SeedError: naming the first offending path, e.g.
        ``vehicles.0.dailyRate``.
    """
    try:
        jsonschema.validate(instance=data, schema=schema or load_schema())
    except jsonschema.ValidationError as e:
        raise SeedError(_describe(e)) from e


def validate_seed_file(
    filename: Union[str, Path], schema: Optional[Dict[str, Any]] = None
) -> List[str]:
    """Validate a seed file without building a desk. Returns list of errors."""
    try:
        data = _read_seed(filename)
    except SeedError as e:
        return [str(e)]
    validator = jsonschema.Draft7Validator(schema or load_schema())
    return [_describe(e) for e in validator.iter_errors(data)]


def _add_vehicles(desk: RentalDesk, data: Dict[str, Any]) -> None:
    for dct in data["vehicles"]:
        vehicle = desk.add_vehicle(
            dct["make"],
            dct["model"],
            dct["year"],
            dct["category"],
            dct["dailyRate"],
        )
        status = VehicleStatus(dct.get("status", VehicleStatus.AVAILABLE.value))
        if status != VehicleStatus.AVAILABLE:
            desk.set_vehicle_status(vehicle.id, status)


def seed_desk(desk: RentalDesk, data: Dict[str, Any]) -> RentalDesk:
    """
    Populate a desk from parsed seed data.

    The whole document is validated first, so a bad entry adds nothing.
    Vehicles are added in file order, so on an empty desk the first entry
    gets id 1. A vehicle's optional ``status`` is applied after it is added.
    """
    validate_seed_data(data)
    _add_vehicles(desk, data)
    return desk


def load_desk(
    filename: Union[str, Path],
    rng: Optional[random.Random] = None,
) -> RentalDesk:
    """Build a fresh desk from a YAML seed file."""
    data = _read_seed(filename)
    validate_seed_data(data)
    desk = RentalDesk(rng=rng, opening_revenue=data.get("openingRevenue", 0))
    _add_vehicles(desk, data)
    logger.debug(
        "Loaded %d vehicles from %s (opening revenue %s)",
        len(data["vehicles"]),
        filename,
        desk.total_revenue(),
    )
    return desk
