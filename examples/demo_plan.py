from drawdown_planner.advice import analyze_strategy_advice, render_advice
from drawdown_planner.config import DEFAULT_CONFIG
from drawdown_planner.simulator import calculate_position_stats
from drawdown_planner.strategy import (
    STRATEGY_ORDER,
    ComparableStrategy,
    build_allocations,
    generate_preset_weights,
)


config = DEFAULT_CONFIG
levels = config.active_price_levels
presets = generate_preset_weights(len(levels))

strategies = [
    ComparableStrategy(name=name, allocations=build_allocations(levels, presets.for_strategy(name)))
    for name in STRATEGY_ORDER
]

bottom = 52000
for strategy in strategies:
    stats = calculate_position_stats(strategy.allocations, bottom, config.target_price, config.total_size)
    print(f"{strategy.name.label:>9}: filled={stats.filled_position:.3f} avg={stats.avg_cost:,.0f} profit={stats.profit:,.0f}")

advice = analyze_strategy_advice(
    strategies,
    config.price_levels,
    config.target_price,
    config.total_size,
    config.bottom_min,
    config.bottom_max,
    config.bottom_step,
)
if advice is not None:
    for line in render_advice(advice):
        print(line)
