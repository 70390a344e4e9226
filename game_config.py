"""
Croissant Game - Configuration

Economic constants for one playthrough. All monetary values are integer cents.

The config is built once, handed to the engine and never mutated afterwards.
Reading a config file is the caller's job; GameConfig.from_dict() accepts the
already-deserialized mapping.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping


# =============================================================================
# DEFAULT ECONOMY
# Used when a key is missing from the loaded mapping.
# =============================================================================

DEFAULT_TURNS = 30
DEFAULT_STARTING_MONEY = 0
DEFAULT_COOK_PAYOFF = 100  # $1.00

DEFAULT_CHEESE_COST = 150
DEFAULT_CHEESE_QUANTITY_MAXIMUM = 10
DEFAULT_CHEESE_MATURE_TURNS = 5
DEFAULT_CHEESE_PAYOFF = 400

DEFAULT_RECIPE_COST = 1000
DEFAULT_RECIPE_DIVIDEND = 50
DEFAULT_COOKBOOK_COST = 5000
DEFAULT_COOKBOOK_DIVIDEND = 300

DEFAULT_CROISSANT_STARTING_PRICE = 200
DEFAULT_CROISSANT_QUANTITY_MAXIMUM = 10
DEFAULT_CROISSANT_PRICE_FALL = 10
DEFAULT_CROISSANT_PRICE_RISE = 25
DEFAULT_CROISSANT_MINIMUM_PRICE = 50


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable economic constants.

    Non-negative values are expected but not enforced here; a malformed
    deployment is the loader's problem.
    """

    turns: int = DEFAULT_TURNS
    starting_money: int = DEFAULT_STARTING_MONEY
    cook_payoff: int = DEFAULT_COOK_PAYOFF

    cheese_cost: int = DEFAULT_CHEESE_COST
    cheese_quantity_maximum: int = DEFAULT_CHEESE_QUANTITY_MAXIMUM
    cheese_mature_turns: int = DEFAULT_CHEESE_MATURE_TURNS
    cheese_payoff: int = DEFAULT_CHEESE_PAYOFF

    recipe_cost: int = DEFAULT_RECIPE_COST
    recipe_dividend: int = DEFAULT_RECIPE_DIVIDEND
    cookbook_cost: int = DEFAULT_COOKBOOK_COST
    cookbook_dividend: int = DEFAULT_COOKBOOK_DIVIDEND

    croissant_starting_price: int = DEFAULT_CROISSANT_STARTING_PRICE
    croissant_quantity_maximum: int = DEFAULT_CROISSANT_QUANTITY_MAXIMUM
    croissant_price_fall: int = DEFAULT_CROISSANT_PRICE_FALL
    croissant_price_rise: int = DEFAULT_CROISSANT_PRICE_RISE
    croissant_minimum_price: int = DEFAULT_CROISSANT_MINIMUM_PRICE

    @property
    def turns_limit(self) -> int:
        return self.turns

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GameConfig':
        """
        Build a config from a deserialized mapping (e.g. a parsed TOML table).

        Missing keys keep their defaults. Unknown keys are rejected so that a
        typo in the file does not silently fall back to a default.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        return cls(**{key: int(value) for key, value in data.items()})


def default_config() -> GameConfig:
    """Config with every value at its default."""
    return GameConfig()
