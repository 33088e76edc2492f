"""Chargeable weight selection between actual and volumetric weight."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from app.core.config import settings

_TWO_PLACES = Decimal("0.01")
_CBM_DIVISOR = Decimal(1_000_000)


class ChargeBasis(str, Enum):
    ACTUAL = "actual"
    VOLUMETRIC = "volumetric"


@dataclass(frozen=True)
class ChargeableWeight:
    actual: Decimal
    volumetric: Decimal
    cbm: Decimal
    basis: ChargeBasis

    @property
    def value(self) -> Decimal:
        return self.volumetric if self.basis is ChargeBasis.VOLUMETRIC else self.actual

    @property
    def basis_label(self) -> str:
        return "Vol. Wt." if self.basis is ChargeBasis.VOLUMETRIC else "Act. Wt."


def volumetric_weight(
    length: Decimal, width: Decimal, height: Decimal, divisor: Decimal
) -> Decimal:
    """L * W * H / divisor rounded to two places; zero when divisor is not positive."""
    if divisor <= 0:
        return Decimal(0)
    raw = length * width * height / divisor
    return raw.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def compute_chargeable_weight(
    basis: ChargeBasis,
    weight: Decimal | None = None,
    length: Decimal | None = None,
    width: Decimal | None = None,
    height: Decimal | None = None,
    divisor: Decimal | None = None,
) -> ChargeableWeight:
    """Derive actual, volumetric and cubic-metre figures for a parcel.

    Missing dimensions count as zero and a missing or zero divisor falls back to
    ``settings.DEFAULT_VOLUMETRIC_DIVISOR``.
    """
    actual = weight or Decimal(0)
    length = length or Decimal(0)
    width = width or Decimal(0)
    height = height or Decimal(0)
    if not divisor:
        divisor = Decimal(str(settings.DEFAULT_VOLUMETRIC_DIVISOR))

    return ChargeableWeight(
        actual=actual,
        volumetric=volumetric_weight(length, width, height, divisor),
        cbm=length * width * height / _CBM_DIVISOR,
        basis=basis,
    )
