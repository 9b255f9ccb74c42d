#!/usr/bin/env python3
"""
Command line front desk for the car rental fleet.

Commands:
  fleet    - List vehicles and their status
  stats    - Show fleet counts and total revenue
  quote    - Price a rental from a daily rate, days and discount
  reserve  - Make (and optionally confirm) a reservation on the seeded fleet

State lives in memory only, so every run starts from the seed file.
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from rental import (
    PriceBreakdown,
    RentalDesk,
    RentalError,
    Reservation,
    Vehicle,
    load_desk,
)
from rental import config

# =============================================================================
# Formatting helpers
# =============================================================================


def format_currency(amount: Optional[float], currency: str = config.currency) -> str:
    """Format an amount for display, e.g. 'KES 2,500.00'."""
    return f"{currency} {amount:,.2f}" if amount is not None else "-"


def format_mileage(km: Optional[int]) -> str:
    """Format odometer reading for display."""
    return f"{km:,} km" if km is not None else "-"


def make_fleet_table(vehicles: List[Vehicle]) -> List[List[str]]:
    """Convert vehicles to table rows."""
    rows = []
    for v in vehicles:
        rows.append(
            [
                v.id,
                v.name,
                v.year,
                v.category,
                v.registration,
                format_mileage(v.mileage),
                f"{format_currency(v.daily_rate)}/day",
                v.status.value.upper(),
            ]
        )
    return rows


def make_quote_rows(result: PriceBreakdown, discount_percent: float) -> List[List[str]]:
    """Convert a price breakdown to label/value rows."""
    return [
        ["Subtotal", format_currency(result.subtotal)],
        [f"Discount ({discount_percent:g}%)", f"-{format_currency(result.discount)}"],
        ["Total", format_currency(result.total)],
    ]


def print_reservation(reservation: Reservation) -> None:
    print(f"  Code:     {reservation.code}")
    print(f"  Customer: {reservation.customer_name} <{reservation.customer_email}>")
    print(f"  Vehicle:  {reservation.vehicle} (#{reservation.vehicle_id})")
    print(f"  Dates:    {reservation.pickup_date} -> {reservation.return_date}"
          f" ({reservation.days} days)")
    print(f"  Total:    {format_currency(reservation.total)}")
    print(f"  Status:   {reservation.status.value}")


# =============================================================================
# Commands
# =============================================================================


def cmd_fleet(desk: RentalDesk, args):
    """List vehicles and their status."""
    vehicles = desk.list_available_vehicles() if args.available else desk.list_vehicles()

    if not vehicles:
        print("No vehicles found.")
        return 0

    headers = ["ID", "Vehicle", "Year", "Category", "Reg", "Mileage", "Rate", "Status"]
    print(tabulate(make_fleet_table(vehicles), headers=headers, tablefmt="simple"))
    return 0


def cmd_stats(desk: RentalDesk, args):
    """Show fleet counts and total revenue."""
    stats = desk.stats()
    rows = [
        ["Total cars", stats.total_vehicles],
        ["Available", stats.available],
        ["Rented", stats.rented],
        ["Revenue", format_currency(stats.revenue)],
    ]
    print(tabulate(rows, tablefmt="plain"))
    return 0


def cmd_quote(desk: RentalDesk, args):
    """Price a rental."""
    if args.rate < 0 or args.days < 0:
        print("Error: rate and days must not be negative")
        return 1
    if not 0 <= args.discount <= 100:
        print("Error: discount must be between 0 and 100")
        return 1

    result = desk.quote(args.rate, args.days, args.discount)
    print(tabulate(make_quote_rows(result, args.discount), tablefmt="plain"))
    return 0


def cmd_reserve(desk: RentalDesk, args):
    """Make a reservation on the seeded fleet."""
    if args.dry_run:
        vehicle = desk.find_vehicle(args.vehicle_id)
        if vehicle is None:
            print(f"Error: Vehicle {args.vehicle_id} not found")
            return 1
        print(f"Would reserve {vehicle.name} for {args.name}"
              f" from {args.pickup} to {args.return_date}.")
        print("(dry run - no changes made)")
        return 0

    try:
        reservation = desk.create_reservation(
            args.name, args.email, args.vehicle_id, args.pickup, args.return_date
        )
        if args.confirm:
            reservation = desk.confirm_reservation(reservation.code)
    except (RentalError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Reservation {reservation.code} "
          f"{'confirmed' if args.confirm else 'created'}:")
    print_reservation(reservation)
    print()
    print(f"Total revenue: {format_currency(desk.total_revenue())}")
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Car rental front desk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleet
  %(prog)s fleet --available
  %(prog)s stats
  %(prog)s quote 2500 3 --discount 10
  %(prog)s reserve "Jane Doe" jane@example.com 1 2024-01-01 2024-01-04
  %(prog)s --fleet my-fleet.yaml reserve Jane j@x.com 3 2024-02-01 2024-02-03 --confirm
""",
    )
    parser.add_argument(
        "--fleet",
        type=Path,
        default=config.fleet_file,
        help="Path to fleet seed YAML file (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    fleet_parser = subparsers.add_parser("fleet", help="List vehicles and their status")
    fleet_parser.add_argument(
        "--available",
        action="store_true",
        help="Only list vehicles that can be reserved",
    )

    subparsers.add_parser("stats", help="Show fleet counts and total revenue")

    quote_parser = subparsers.add_parser("quote", help="Price a rental")
    quote_parser.add_argument("rate", type=float, help="Daily rate")
    quote_parser.add_argument("days", type=int, help="Number of rental days")
    quote_parser.add_argument(
        "--discount",
        type=float,
        default=0,
        help="Discount percentage, 0-100 (default: 0)",
    )

    reserve_parser = subparsers.add_parser("reserve", help="Make a reservation")
    reserve_parser.add_argument("name", type=str, help="Customer name")
    reserve_parser.add_argument("email", type=str, help="Customer email")
    reserve_parser.add_argument("vehicle_id", type=int, help="Vehicle ID")
    reserve_parser.add_argument("pickup", type=str, help="Pickup date (YYYY-MM-DD)")
    reserve_parser.add_argument(
        "return_date", metavar="return", type=str, help="Return date (YYYY-MM-DD)"
    )
    reserve_parser.add_argument(
        "--confirm",
        action="store_true",
        help="Confirm the reservation straight away",
    )
    reserve_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be reserved without reserving",
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)-12s %(levelname)-8s %(message)s",
    )

    if not args.fleet.exists():
        print(f"Error: File not found: {args.fleet}")
        return 1

    try:
        desk = load_desk(args.fleet)
    except RentalError as e:
        print(f"Error: {e}")
        return 1

    if args.command == "fleet":
        return cmd_fleet(desk, args)
    elif args.command == "stats":
        return cmd_stats(desk, args)
    elif args.command == "quote":
        return cmd_quote(desk, args)
    elif args.command == "reserve":
        return cmd_reserve(desk, args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
