"""Config loading and freezing."""

from drawdown_planner.config.loader import (
    compute_config_hash,
    freeze_config,
    load_config,
    load_selection,
    recommend_sweep_range,
    serialize_config,
    validate_config,
    verify_config_lock,
)
from drawdown_planner.config.models import (
    CONSTANTS,
    DEFAULT_CONFIG,
    ConfigWarning,
    PlannerConstants,
    SimulatorConfig,
    SweepRange,
)

__all__ = [
    "CONSTANTS",
    "ConfigWarning",
    "DEFAULT_CONFIG",
    "PlannerConstants",
    "SimulatorConfig",
    "SweepRange",
    "compute_config_hash",
    "freeze_config",
    "load_config",
    "load_selection",
    "recommend_sweep_range",
    "serialize_config",
    "validate_config",
    "verify_config_lock",
]
