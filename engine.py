"""
Croissant Game - Game Engine

Core game state and turn logic. All amounts are integer cents.

This module is the single source of truth for:
- GameState dataclass
- One operation per player action (validate, apply, advance the turn)
- The shared end-of-turn tick (cheese aging, dividends, croissant price)
- The rejection taxonomy raised when an action is refused
"""

from dataclasses import dataclass, asdict, field
from typing import Optional, Dict, Any, List, Tuple
from enum import Enum
import logging

from game_config import GameConfig, default_config
from messages import format_money, render_message

logger = logging.getLogger(__name__)


# =============================================================================
# GAME STATE DATACLASS
# =============================================================================

@dataclass
class GameState:
    """
    Mutable state of one playthrough.

    Only GameEngine modifies these values. `cheeses` holds one age per owned
    unit; order is irrelevant.
    """

    turn: int = 1
    money: int = 0
    cheeses: List[int] = field(default_factory=list)
    recipes: int = 0
    cookbooks: int = 0
    croissant_price: int = 0
    croissants: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> 'GameState':
        """Starting state for a new game."""
        return cls(
            turn=1,
            money=config.starting_money,
            croissant_price=max(config.croissant_starting_price, config.croissant_minimum_price),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameState':
        data = dict(data)
        data['cheeses'] = list(data.get('cheeses', []))
        return cls(**data)


# =============================================================================
# GAME ENGINE CLASS
# Validates actions, applies their effects and advances the turn clock.
# =============================================================================

class GameEngine:
    """
    Main game engine.

    Every action either applies fully (effects plus one turn advancement) or
    raises an InvalidActionError subclass without touching the state.
    """

    def __init__(self, config: GameConfig, state: Optional[GameState] = None):
        self.config = config
        self.state = state or GameState.from_config(config)

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def is_game_over(self) -> bool:
        return self.state.turn > self.config.turns

    def count_cheeses(self) -> Tuple[int, int]:
        """Return (mature, non_mature) cheese counts."""
        mature = 0
        non_mature = 0
        for age in self.state.cheeses:
            if age >= self.config.cheese_mature_turns:
                mature += 1
            else:
                non_mature += 1
        return mature, non_mature

    # -------------------------------------------------------------------------
    # ACTIONS
    # -------------------------------------------------------------------------

    def execute_cook(self):
        self._check_not_over()

        self.state.money += self.config.cook_payoff
        self._end_turn()
        logger.debug(f"Cooked for {format_money(self.config.cook_payoff)}")

    def execute_buy_cheese(self, quantity: int):
        self._check_not_over()

        if quantity <= 0:
            raise InvalidQuantityError()
        if quantity > self.config.cheese_quantity_maximum:
            raise CheeseMaxQuantityExceededError(self.config.cheese_quantity_maximum)
        total_cost = self.config.cheese_cost * quantity
        self._check_affordable(total_cost)

        self.state.money -= total_cost
        self.state.cheeses.extend([0] * quantity)
        self._end_turn()
        logger.debug(f"Bought {quantity} cheese for {format_money(total_cost)}")

    def execute_sell_cheese(self):
        self._check_not_over()

        mature, _non_mature = self.count_cheeses()
        if mature == 0:
            raise NoCheeseToSellError()

        total_gain = mature * self.config.cheese_payoff
        self.state.money += total_gain
        self.state.cheeses = [
            age for age in self.state.cheeses
            if age < self.config.cheese_mature_turns
        ]
        self._end_turn()
        logger.debug(f"Sold {mature} mature cheese for {format_money(total_gain)}")

    def execute_publish_recipe(self):
        self._check_not_over()
        self._check_affordable(self.config.recipe_cost)

        self.state.money -= self.config.recipe_cost
        self.state.recipes += 1
        self._end_turn(new_recipes=1)
        logger.debug(f"Published recipe #{self.state.recipes}")

    def execute_publish_cookbook(self):
        self._check_not_over()
        self._check_affordable(self.config.cookbook_cost)

        self.state.money -= self.config.cookbook_cost
        self.state.cookbooks += 1
        self._end_turn(new_cookbooks=1)
        logger.debug(f"Published cookbook #{self.state.cookbooks}")

    def execute_buy_croissants(self, quantity: int):
        self._check_not_over()

        if quantity <= 0:
            raise InvalidQuantityError()
        if quantity > self.config.croissant_quantity_maximum:
            raise CroissantMaxQuantityExceededError(self.config.croissant_quantity_maximum)
        total_cost = self.state.croissant_price * quantity
        self._check_affordable(total_cost)

        self.state.money -= total_cost
        self.state.croissants += quantity
        self._end_turn(croissants_bought=quantity)
        logger.debug(f"Bought {quantity} croissants for {format_money(total_cost)}")

    # -------------------------------------------------------------------------
    # TURN LOOP
    # -------------------------------------------------------------------------

    def _check_not_over(self):
        if self.is_game_over():
            raise GameOverError()

    def _check_affordable(self, amount: int):
        if amount > self.state.money:
            raise NotEnoughMoneyError(amount)

    def _end_turn(self, croissants_bought: int = 0, new_recipes: int = 0, new_cookbooks: int = 0):
        """
        World tick shared by every accepted action.

        1. Advance the turn counter
        2. Age every cheese by one turn
        3. Pay dividends on recipes and cookbooks owned before this action
        4. Move the croissant price
        """
        self.state.turn += 1

        self.state.cheeses = [age + 1 for age in self.state.cheeses]

        # Assets published this turn start paying on the next tick
        paying_recipes = self.state.recipes - new_recipes
        paying_cookbooks = self.state.cookbooks - new_cookbooks
        self.state.money += self.config.recipe_dividend * paying_recipes
        self.state.money += self.config.cookbook_dividend * paying_cookbooks

        self._move_croissant_price(croissants_bought)

        if self.is_game_over():
            logger.info(f"Game over after turn {self.config.turns} with {format_money(self.state.money)}")

    def _move_croissant_price(self, croissants_bought: int):
        """Price rises per unit bought, falls on idle turns, never below the floor."""
        if croissants_bought > 0:
            price = self.state.croissant_price + self.config.croissant_price_rise * croissants_bought
        else:
            price = self.state.croissant_price - self.config.croissant_price_fall
        self.state.croissant_price = max(self.config.croissant_minimum_price, price)

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def get_state(self) -> GameState:
        """Return a detached state snapshot."""
        return GameState.from_dict(self.state.to_dict())

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def money(self) -> int:
        return self.state.money

    @property
    def cheeses(self) -> List[int]:
        return list(self.state.cheeses)

    @property
    def recipes(self) -> int:
        return self.state.recipes

    @property
    def cookbooks(self) -> int:
        return self.state.cookbooks

    @property
    def croissant_price(self) -> int:
        return self.state.croissant_price

    @property
    def croissants(self) -> int:
        return self.state.croissants

    def get_turn_summary(self) -> Dict[str, Any]:
        """Get summary of current turn state for display."""
        mature, non_mature = self.count_cheeses()
        return {
            'turn': self.state.turn,
            'turns_limit': self.config.turns,
            'money': self.state.money,
            'money_display': format_money(self.state.money),
            'mature_cheeses': mature,
            'non_mature_cheeses': non_mature,
            'recipes': self.state.recipes,
            'cookbooks': self.state.cookbooks,
            'croissants': self.state.croissants,
            'croissant_price': self.state.croissant_price,
            'croissant_price_display': format_money(self.state.croissant_price),
            'game_over': self.is_game_over(),
        }


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ErrorCause(Enum):
    """Machine-readable reason an action was rejected."""
    INVALID_ACTION = 'invalid_action'
    INVALID_QUANTITY = 'invalid_quantity'
    EXTRANEOUS_QUANTITY = 'extraneous_quantity'
    GAME_OVER = 'game_over'
    NOT_ENOUGH_MONEY = 'not_enough_money'
    CHEESE_MAX_QUANTITY_EXCEEDED = 'cheese_max_quantity_exceeded'
    NO_CHEESE_TO_SELL = 'no_cheese_to_sell'
    CROISSANT_MAX_QUANTITY_EXCEEDED = 'croissant_max_quantity_exceeded'


class InvalidActionError(Exception):
    """
    Base class for every rejected action.

    `amount` is set for money shortfalls (cents required) and `cap` for
    quantity limits, so the message can be rendered without the config.
    """

    cause = ErrorCause.INVALID_ACTION

    def __init__(self, amount: Optional[int] = None, cap: Optional[int] = None):
        self.amount = amount
        self.cap = cap
        super().__init__(self.describe())

    def describe(self) -> str:
        return render_message(
            f"rejections/{self.cause.value}.txt",
            {'amount': self.amount, 'cap': self.cap},
        )

    def __str__(self) -> str:
        return self.describe()


class UnknownActionError(InvalidActionError):
    """Raised when the action id is not recognised."""
    cause = ErrorCause.INVALID_ACTION


class InvalidQuantityError(InvalidActionError):
    """Raised when a quantity is missing or not positive."""
    cause = ErrorCause.INVALID_QUANTITY


class ExtraneousQuantityError(InvalidActionError):
    """Raised when a quantity is given to an action that takes none."""
    cause = ErrorCause.EXTRANEOUS_QUANTITY


class GameOverError(InvalidActionError):
    """Raised when attempting to play after game over."""
    cause = ErrorCause.GAME_OVER


class NotEnoughMoneyError(InvalidActionError):
    cause = ErrorCause.NOT_ENOUGH_MONEY

    def __init__(self, required_amount: int):
        super().__init__(amount=required_amount)

    @property
    def required_amount(self) -> int:
        return self.amount


class CheeseMaxQuantityExceededError(InvalidActionError):
    cause = ErrorCause.CHEESE_MAX_QUANTITY_EXCEEDED

    def __init__(self, cap: int):
        super().__init__(cap=cap)


class NoCheeseToSellError(InvalidActionError):
    """Raised when selling with no mature cheese."""
    cause = ErrorCause.NO_CHEESE_TO_SELL


class CroissantMaxQuantityExceededError(InvalidActionError):
    cause = ErrorCause.CROISSANT_MAX_QUANTITY_EXCEEDED

    def __init__(self, cap: int):
        super().__init__(cap=cap)


# =============================================================================
# NEW GAME FACTORY
# =============================================================================

def new_game(config: Optional[GameConfig] = None) -> GameEngine:
    """Create a new game, using the default economy when no config is given."""
    return GameEngine(config=config or default_config())
