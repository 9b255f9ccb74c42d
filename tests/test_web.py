#!/usr/bin/env python3
"""Tests for the Flask front desk pages."""
import random

import pytest

from rental import RentalDesk, VehicleStatus
from web.app import create_app, format_currency, status_color


@pytest.fixture
def desk():
    desk = RentalDesk(rng=random.Random(0), opening_revenue=145000)
    desk.add_vehicle("Toyota", "Corolla", 2022, "Sedan", 2500)
    desk.add_vehicle("Honda", "CR-V", 2023, "SUV", 4000)
    desk.set_vehicle_status(2, VehicleStatus.RENTED)
    return desk


@pytest.fixture
def client(desk):
    app = create_app(desk)
    app.config["TESTING"] = True
    return app.test_client()


def reserve(client, **overrides):
    form = {
        "customer_name": "Jane",
        "customer_email": "j@x.com",
        "vehicle_id": "1",
        "pickup_date": "2024-01-01",
        "return_date": "2024-01-04",
    }
    form.update(overrides)
    return client.post("/reservations", data=form, follow_redirects=True)


class TestFilters:
    """Tests for template filters."""

    def test_format_currency(self):
        assert format_currency(2500) == "KES 2,500.00"
        assert format_currency(None) == "—"

    def test_status_color(self):
        assert "green" in status_color(VehicleStatus.AVAILABLE)
        assert "red" in status_color(VehicleStatus.RENTED)


class TestDashboard:
    """Tests for the dashboard page."""

    def test_shows_stats_and_fleet(self, client):
        response = client.get("/")
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "KES 145,000.00" in html
        assert "Toyota Corolla" in html
        assert "RENTED" in html


class TestReservations:
    """Tests for the reservation pages."""

    def test_empty_table(self, client):
        html = client.get("/reservations").get_data(as_text=True)
        assert "No reservations yet" in html

    def test_only_available_vehicles_offered(self, client):
        html = client.get("/reservations").get_data(as_text=True)
        assert '<option value="1">' in html
        assert '<option value="2">' not in html

    def test_create(self, client, desk):
        html = reserve(client).get_data(as_text=True)
        reservation = desk.list_reservations()[0]
        assert f"Reservation {reservation.code} created successfully!" in html
        assert desk.find_vehicle(1).status == VehicleStatus.RESERVED
        assert desk.total_revenue() == 152500

    def test_create_with_bad_dates(self, client, desk):
        html = reserve(client, return_date="2024-01-01").get_data(as_text=True)
        assert "must be after" in html
        assert desk.list_reservations() == []

    def test_create_without_vehicle(self, client, desk):
        html = reserve(client, vehicle_id="").get_data(as_text=True)
        assert "Please select a vehicle!" in html
        assert desk.list_reservations() == []

    def test_create_for_rented_vehicle(self, client, desk):
        html = reserve(client, vehicle_id="2").get_data(as_text=True)
        assert "not available" in html
        assert desk.total_revenue() == 145000

    def test_confirm(self, client, desk):
        reserve(client)
        code = desk.list_reservations()[0].code
        html = client.post(f"/reservations/{code}/confirm", follow_redirects=True).get_data(as_text=True)
        assert f"Reservation {code} confirmed!" in html
        assert desk.find_vehicle(1).status == VehicleStatus.RENTED

    def test_confirm_button_only_on_pending_rows(self, client, desk):
        reserve(client)
        code = desk.list_reservations()[0].code
        html = client.get("/reservations").get_data(as_text=True)
        assert f"/reservations/{code}/confirm" in html

        client.post(f"/reservations/{code}/confirm")
        html = client.get("/reservations").get_data(as_text=True)
        assert f"/reservations/{code}/confirm" not in html
        assert f"/reservations/{code}/cancel" in html

    def test_cancel(self, client, desk):
        reserve(client)
        code = desk.list_reservations()[0].code
        html = client.post(f"/reservations/{code}/cancel", follow_redirects=True).get_data(as_text=True)
        assert f"Reservation {code} cancelled!" in html
        assert desk.find_vehicle(1).status == VehicleStatus.AVAILABLE
        assert desk.total_revenue() == 145000

    def test_unknown_code(self, client, desk):
        html = client.post("/reservations/RES-0-0/confirm", follow_redirects=True).get_data(as_text=True)
        assert "Reservation RES-0-0 not found" in html


class TestCalculator:
    """Tests for the rental cost calculator page."""

    def test_get(self, client):
        assert client.get("/calculator").status_code == 200

    def test_quote(self, client):
        response = client.post(
            "/calculator", data={"daily_rate": "4000", "days": "5", "discount": "10"}
        )
        html = response.get_data(as_text=True)
        assert "Total: KES 18,000.00" in html

    def test_rejects_bad_discount(self, client):
        response = client.post(
            "/calculator", data={"daily_rate": "4000", "days": "5", "discount": "150"}
        )
        html = response.get_data(as_text=True)
        assert "Discount must be between 0 and 100" in html
        assert "Total:" not in html

    def test_rejects_non_numbers(self, client):
        response = client.post(
            "/calculator", data={"daily_rate": "lots", "days": "5", "discount": "0"}
        )
        assert "Please enter numbers only" in response.get_data(as_text=True)
