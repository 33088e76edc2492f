"""Tests for actual vs volumetric chargeable weight."""

from decimal import Decimal

from app.services.chargeable_weight import (
    ChargeBasis,
    compute_chargeable_weight,
    volumetric_weight,
)


class TestVolumetricWeight:
    def test_dimensions_over_divisor(self):
        result = volumetric_weight(Decimal("100"), Decimal("50"), Decimal("60"), Decimal("6000"))
        assert result == Decimal("50.00")

    def test_rounded_to_two_places(self):
        # 10 * 10 * 10 / 6000 = 0.1666...
        result = volumetric_weight(Decimal("10"), Decimal("10"), Decimal("10"), Decimal("6000"))
        assert result == Decimal("0.17")

    def test_rounds_half_up(self):
        # 1 * 1 * 25 / 1000 = 0.025
        result = volumetric_weight(Decimal("1"), Decimal("1"), Decimal("25"), Decimal("1000"))
        assert result == Decimal("0.03")

    def test_negative_divisor(self):
        result = volumetric_weight(Decimal("10"), Decimal("10"), Decimal("10"), Decimal("-5"))
        assert result == Decimal("0")


class TestComputeChargeableWeight:
    def test_actual_basis(self):
        weight = compute_chargeable_weight(
            ChargeBasis.ACTUAL,
            weight=Decimal("12.5"),
            length=Decimal("100"),
            width=Decimal("50"),
            height=Decimal("60"),
        )
        assert weight.value == Decimal("12.5")
        assert weight.volumetric == Decimal("50.00")
        assert weight.basis_label == "Act. Wt."

    def test_volumetric_basis(self):
        weight = compute_chargeable_weight(
            ChargeBasis.VOLUMETRIC,
            weight=Decimal("12.5"),
            length=Decimal("100"),
            width=Decimal("50"),
            height=Decimal("60"),
        )
        assert weight.value == Decimal("50.00")
        assert weight.basis_label == "Vol. Wt."

    def test_cubic_metres(self):
        weight = compute_chargeable_weight(
            ChargeBasis.ACTUAL,
            length=Decimal("100"),
            width=Decimal("50"),
            height=Decimal("60"),
        )
        assert weight.cbm == Decimal("0.3")

    def test_default_divisor(self):
        weight = compute_chargeable_weight(
            ChargeBasis.VOLUMETRIC,
            length=Decimal("60"),
            width=Decimal("50"),
            height=Decimal("40"),
        )
        # 120000 / 6000
        assert weight.value == Decimal("20.00")

    def test_zero_divisor_falls_back_to_default(self):
        weight = compute_chargeable_weight(
            ChargeBasis.VOLUMETRIC,
            length=Decimal("60"),
            width=Decimal("50"),
            height=Decimal("40"),
            divisor=Decimal("0"),
        )
        assert weight.value == Decimal("20.00")

    def test_custom_divisor(self):
        weight = compute_chargeable_weight(
            ChargeBasis.VOLUMETRIC,
            length=Decimal("60"),
            width=Decimal("50"),
            height=Decimal("40"),
            divisor=Decimal("5000"),
        )
        assert weight.value == Decimal("24.00")

    def test_missing_values_are_zero(self):
        weight = compute_chargeable_weight(ChargeBasis.ACTUAL)
        assert weight.value == Decimal("0")
        assert weight.volumetric == Decimal("0")
        assert weight.cbm == Decimal("0")
