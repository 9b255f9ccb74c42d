"""Flask web application for the car rental front desk."""

from datetime import date
from pathlib import Path
from typing import Optional

from flask import Flask, current_app, render_template, request, redirect, url_for, flash

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from rental import RentalDesk, RentalError, VehicleStatus, load_desk
from rental import config


def format_currency(amount):
    """Format an amount with the configured currency prefix."""
    if amount is None:
        return "—"
    return f"{config.currency} {amount:,.2f}"


def format_mileage(km):
    """Format mileage with comma separator."""
    if km is None:
        return "—"
    return f"{km:,} km"


def status_color(status: VehicleStatus) -> str:
    """Get Tailwind color classes for a vehicle status badge."""
    colors = {
        VehicleStatus.AVAILABLE: "bg-green-100 text-green-800 border-green-200",
        VehicleStatus.RESERVED: "bg-yellow-100 text-yellow-800 border-yellow-200",
        VehicleStatus.RENTED: "bg-red-100 text-red-800 border-red-200",
        VehicleStatus.MAINTENANCE: "bg-gray-100 text-gray-500 border-gray-200",
    }
    return colors.get(status, "bg-gray-100 text-gray-800")


def get_desk() -> RentalDesk:
    """The desk owned by the running application."""
    return current_app.extensions["rental_desk"]


def index():
    """Dashboard with fleet stats and the car grid."""
    desk = get_desk()
    return render_template(
        "index.html",
        stats=desk.stats(),
        vehicles=desk.list_vehicles(),
        active_tab="dashboard",
    )


def reservations():
    """Reservations table plus the new reservation form."""
    desk = get_desk()
    return render_template(
        "reservations.html",
        reservations=desk.list_reservations(),
        available=desk.list_available_vehicles(),
        today=date.today().isoformat(),
        active_tab="reservations",
    )


def create_reservation():
    """Handle new reservation form submission."""
    customer_name = request.form.get("customer_name", "").strip()
    customer_email = request.form.get("customer_email", "").strip()
    vehicle_id = request.form.get("vehicle_id")
    pickup_date = request.form.get("pickup_date")
    return_date = request.form.get("return_date")

    # Validate
    if not vehicle_id:
        flash("Please select a vehicle!", "error")
        return redirect(url_for("reservations"))
    if not pickup_date or not return_date:
        flash("Please enter pickup and return dates", "error")
        return redirect(url_for("reservations"))

    try:
        reservation = get_desk().create_reservation(
            customer_name, customer_email, int(vehicle_id), pickup_date, return_date
        )
    except (RentalError, ValueError) as e:
        current_app.logger.info("Reservation rejected: %s", e)
        flash(str(e), "error")
        return redirect(url_for("reservations"))

    current_app.logger.info(
        "Reservation %s created for vehicle %s", reservation.code, reservation.vehicle_id
    )
    flash(f"Reservation {reservation.code} created successfully!", "success")
    return redirect(url_for("reservations"))


def confirm_reservation(code: str):
    """Confirm a reservation."""
    try:
        get_desk().confirm_reservation(code)
    except RentalError as e:
        flash(str(e), "error")
    else:
        current_app.logger.info("Reservation %s confirmed", code)
        flash(f"Reservation {code} confirmed!", "success")
    return redirect(url_for("reservations"))


def cancel_reservation(code: str):
    """Cancel a reservation."""
    try:
        get_desk().cancel_reservation(code)
    except RentalError as e:
        flash(str(e), "error")
    else:
        current_app.logger.info("Reservation %s cancelled", code)
        flash(f"Reservation {code} cancelled!", "success")
    return redirect(url_for("reservations"))


def calculator():
    """Rental cost calculator."""
    result = None
    form = {"daily_rate": "", "days": "", "discount": "0"}

    if request.method == "POST":
        form = {key: request.form.get(key, "") for key in form}
        try:
            rate = float(form["daily_rate"] or 0)
            days = int(form["days"] or 0)
            discount = float(form["discount"] or 0)
        except ValueError:
            flash("Please enter numbers only", "error")
        else:
            if rate < 0 or days < 0:
                flash("Rate and days must not be negative", "error")
            elif not 0 <= discount <= 100:
                flash("Discount must be between 0 and 100", "error")
            else:
                result = get_desk().quote(rate, days, discount)

    return render_template(
        "calculator.html",
        result=result,
        form=form,
        active_tab="calculator",
    )


def create_app(desk: Optional[RentalDesk] = None) -> Flask:
    """Build the app around a desk, seeding one from the fleet file if none is given."""
    app = Flask(__name__)
    app.secret_key = config.secret_key
    if desk is None:
        desk = load_desk(config.fleet_file)
    app.extensions["rental_desk"] = desk

    # Register template filters
    app.jinja_env.filters["format_currency"] = format_currency
    app.jinja_env.filters["format_mileage"] = format_mileage
    app.jinja_env.filters["status_color"] = status_color

    app.add_url_rule("/", view_func=index)
    app.add_url_rule("/reservations", view_func=reservations, methods=["GET"])
    app.add_url_rule(
        "/reservations", view_func=create_reservation, methods=["POST"]
    )
    app.add_url_rule(
        "/reservations/<code>/confirm", view_func=confirm_reservation, methods=["POST"]
    )
    app.add_url_rule(
        "/reservations/<code>/cancel", view_func=cancel_reservation, methods=["POST"]
    )
    app.add_url_rule("/calculator", view_func=calculator, methods=["GET", "POST"])
    return app


if __name__ == "__main__":
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    create_app().run(debug=True, host="0.0.0.0", port=5001)
