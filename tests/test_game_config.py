"""
Tests for game configuration
"""

import dataclasses

import pytest
from game_config import GameConfig, default_config, DEFAULT_TURNS, DEFAULT_CHEESE_COST


class TestGameConfig:
    """Test defaults, immutability and the mapping bridge."""

    def test_defaults(self):
        config = default_config()
        assert config.turns == DEFAULT_TURNS
        assert config.turns_limit == DEFAULT_TURNS
        assert config.cheese_cost == DEFAULT_CHEESE_COST
        assert config.croissant_starting_price >= config.croissant_minimum_price

    def test_all_values_are_integers(self):
        """Money is integer cents; no floats anywhere."""
        for value in default_config().to_dict().values():
            assert isinstance(value, int)

    def test_frozen(self):
        """Config cannot be changed after construction."""
        config = default_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.turns = 99

    def test_from_dict_overrides_and_defaults(self):
        """Given keys override, missing keys keep defaults, values become ints."""
        config = GameConfig.from_dict({'turns': '12', 'cheese_cost': 75})

        assert config.turns == 12
        assert config.cheese_cost == 75
        assert config.cook_payoff == GameConfig().cook_payoff

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match='chese_cost'):
            GameConfig.from_dict({'chese_cost': 75})

    def test_from_dict_accepts_to_dict(self):
        config = dataclasses.replace(default_config(), recipe_dividend=7)
        assert GameConfig.from_dict(config.to_dict()) == config


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
