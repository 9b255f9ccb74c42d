#!/usr/bin/env python3
"""Tests for RentalDesk, the query/command surface over fleet and ledger."""
import random
import threading

import pytest

from rental import (
    DeskStats,
    RentalDesk,
    ReservationNotFound,
    VehicleStatus,
    VehicleUnavailable,
)


@pytest.fixture
def desk():
    desk = RentalDesk(rng=random.Random(0), clock=lambda: 1704067200000)
    desk.add_vehicle("Toyota", "Corolla", 2022, "Sedan", 2500)
    desk.add_vehicle("Honda", "CR-V", 2023, "SUV", 4000)
    desk.add_vehicle("Mercedes", "C-Class", 2023, "Luxury", 9000)
    desk.set_vehicle_status(3, VehicleStatus.MAINTENANCE)
    return desk


class TestQueries:
    """Tests for the query surface."""

    def test_list_vehicles(self, desk):
        assert [v.name for v in desk.list_vehicles()] == [
            "Toyota Corolla", "Honda CR-V", "Mercedes C-Class"
        ]

    def test_find_vehicle(self, desk):
        assert desk.find_vehicle(2).model == "CR-V"
        assert desk.find_vehicle(10) is None

    def test_list_available_vehicles(self, desk):
        assert [v.id for v in desk.list_available_vehicles()] == [1, 2]

    def test_added_vehicle_is_listed_as_available(self, desk):
        car = desk.add_vehicle("Subaru", "Forester", 2022, "SUV", 3800)
        assert car.status == VehicleStatus.AVAILABLE
        assert car in desk.list_available_vehicles()

    def test_quote(self, desk):
        result = desk.quote(2500, 3, 10)
        assert result.total == 6750

    def test_stats(self, desk):
        desk.create_reservation("Jane", "j@x.com", 1, "2024-01-01", "2024-01-04")
        desk.confirm_reservation(desk.list_reservations()[0].code)
        assert desk.stats() == DeskStats(total_vehicles=3, available=1, rented=1, revenue=7500)


class TestCommands:
    """Tests for the command surface."""

    def test_create_confirm_cancel(self, desk):
        reservation = desk.create_reservation("Jane", "j@x.com", 1, "2024-01-01", "2024-01-04")
        assert desk.find_vehicle(1).status == VehicleStatus.RESERVED
        assert desk.total_revenue() == 7500

        desk.confirm_reservation(reservation.code)
        assert desk.find_vehicle(1).status == VehicleStatus.RENTED

        desk.cancel_reservation(reservation.code)
        assert desk.find_vehicle(1).status == VehicleStatus.AVAILABLE
        assert desk.list_reservations() == []
        assert desk.total_revenue() == 0

    def test_maintenance_vehicle_unavailable(self, desk):
        with pytest.raises(VehicleUnavailable):
            desk.create_reservation("Jane", "j@x.com", 3, "2024-01-01", "2024-01-04")

    def test_find_reservation(self, desk):
        reservation = desk.create_reservation("Jane", "j@x.com", 2, "2024-01-01", "2024-01-02")
        assert desk.find_reservation(reservation.code) is reservation

    def test_unknown_code(self, desk):
        with pytest.raises(ReservationNotFound):
            desk.cancel_reservation("RES-1-1")

    def test_opening_revenue(self):
        desk = RentalDesk(opening_revenue=145000)
        assert desk.total_revenue() == 145000


class TestSerialisedAccess:
    """Concurrent callers never double-book a vehicle."""

    def test_one_winner_per_vehicle(self):
        desk = RentalDesk(rng=random.Random(5))
        car = desk.add_vehicle("BMW", "X5", 2023, "Luxury SUV", 10000)
        results = []

        def attempt(i):
            try:
                desk.create_reservation(f"c{i}", "c@x.com", car.id, "2024-01-01", "2024-01-02")
                results.append("ok")
            except VehicleUnavailable:
                results.append("unavailable")

        threads = [threading.Thread(target=attempt, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert desk.total_revenue() == 10000
