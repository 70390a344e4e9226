"""
Action boundary between the text interface and the engine.

The caller hands over an already-parsed (action_id, quantity) pair. This module
checks that the id exists and that a quantity is present exactly when the
action needs one, then runs the engine operation. Rejections come back as
return values so the driving loop can display them and keep prompting.
"""

from enum import IntEnum
from typing import Optional
import logging

from engine import (
    GameEngine,
    InvalidActionError,
    UnknownActionError,
    InvalidQuantityError,
    ExtraneousQuantityError,
)

logger = logging.getLogger(__name__)


class ActionId(IntEnum):
    COOK = 1
    BUY_CHEESE = 2
    SELL_CHEESE = 3
    PUBLISH_RECIPE = 4
    PUBLISH_COOKBOOK = 5
    BUY_CROISSANTS = 6


QUANTITY_ACTIONS = frozenset({ActionId.BUY_CHEESE, ActionId.BUY_CROISSANTS})


def requires_quantity(action_id: ActionId) -> bool:
    return action_id in QUANTITY_ACTIONS


def perform_action(engine: GameEngine, action_id: int, quantity: Optional[int] = None) -> Optional[InvalidActionError]:
    """
    Execute one player action.

    Args:
        engine: The running game
        action_id: 1-6, see ActionId
        quantity: Required for buying cheese or croissants, absent otherwise

    Returns:
        None if the action was applied, otherwise the rejection
    """
    try:
        _dispatch(engine, action_id, quantity)
    except InvalidActionError as e:
        logger.debug(f"Action {action_id} rejected: {e.cause.value}")
        return e
    return None


def _dispatch(engine: GameEngine, action_id: int, quantity: Optional[int]):
    try:
        action = ActionId(action_id)
    except ValueError:
        raise UnknownActionError()

    if requires_quantity(action) and quantity is None:
        raise InvalidQuantityError()
    if not requires_quantity(action) and quantity is not None:
        raise ExtraneousQuantityError()

    if action == ActionId.COOK:
        engine.execute_cook()
    elif action == ActionId.BUY_CHEESE:
        engine.execute_buy_cheese(quantity)
    elif action == ActionId.SELL_CHEESE:
        engine.execute_sell_cheese()
    elif action == ActionId.PUBLISH_RECIPE:
        engine.execute_publish_recipe()
    elif action == ActionId.PUBLISH_COOKBOOK:
        engine.execute_publish_cookbook()
    elif action == ActionId.BUY_CROISSANTS:
        engine.execute_buy_croissants(quantity)
