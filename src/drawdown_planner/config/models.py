"""Configuration models for a drawdown buying plan."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatorConfig:
    asset_name: str
    asset_unit: str
    target_price: float
    target_date: str
    price_levels: tuple[float, ...]  # 0 marks an unused slot
    total_size: float
    bottom_min: float
    bottom_max: float
    bottom_step: float

    @property
    def active_price_levels(self) -> list[float]:
        return [price for price in self.price_levels if price > 0]

    def sorted_price_levels(self) -> list[float]:
        non_zero = sorted(self.active_price_levels, reverse=True)
        zeros = [price for price in self.price_levels if price == 0]
        return non_zero + zeros


@dataclass(frozen=True)
class SweepRange:
    bottom_min: float
    bottom_max: float
    bottom_step: float


@dataclass(frozen=True)
class ConfigWarning:
    code: str
    message: str


@dataclass(frozen=True)
class PlannerConstants:
    max_level_weight: float = 0.4
    allocation_tolerance: float = 0.005


CONSTANTS = PlannerConstants()

DEFAULT_CONFIG = SimulatorConfig(
    asset_name="BTC",
    asset_unit="BTC",
    target_price=126277,
    target_date="2025-10-06",
    price_levels=(70000, 65000, 60000, 55000, 50000, 45000, 40000),
    total_size=1.0,
    bottom_min=35000,
    bottom_max=75000,
    bottom_step=1000,
)
