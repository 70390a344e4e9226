"""
Tests for message templates and money formatting
"""

import pytest
from messages import MessageEngine, format_money, render_message
from engine import (
    InvalidActionError, UnknownActionError, InvalidQuantityError, ExtraneousQuantityError,
    GameOverError, NotEnoughMoneyError, CheeseMaxQuantityExceededError,
    NoCheeseToSellError, CroissantMaxQuantityExceededError, ErrorCause,
)


class TestFormatMoney:
    """Test cents formatting."""

    @pytest.mark.parametrize('cents, expected', [
        (0, '0.00'),
        (5, '0.05'),
        (99, '0.99'),
        (100, '1.00'),
        (1234, '12.34'),
        (100000, '1000.00'),
        (-105, '-1.05'),
    ])
    def test_format(self, cents, expected):
        assert format_money(cents) == expected


class TestRejectionMessages:
    """Test the text of each rejection."""

    def test_descriptions(self):
        assert UnknownActionError().describe() == 'Invalid action.'
        assert InvalidQuantityError().describe() == 'Action requires a quantity greater than 0.'
        assert ExtraneousQuantityError().describe() == 'Action should not have a quantity.'
        assert GameOverError().describe() == 'Game is over.'
        assert NotEnoughMoneyError(1234).describe() == 'Not enough money, need at least $12.34.'
        assert CheeseMaxQuantityExceededError(5).describe() == 'Cannot buy that much cheese (max 5).'
        assert NoCheeseToSellError().describe() == 'You have no mature cheese to sell.'
        assert CroissantMaxQuantityExceededError(8).describe() == 'Cannot buy that many croissants (max 8).'

    def test_str_matches_describe(self):
        error = NotEnoughMoneyError(50)
        assert str(error) == error.describe() == 'Not enough money, need at least $0.50.'

    def test_every_cause_has_a_template(self):
        """No cause renders the missing-template placeholder."""
        for cause in ErrorCause:
            text = render_message(f"rejections/{cause.value}.txt", {'amount': 0, 'cap': 0})
            assert not text.startswith('[Template')

    def test_payload_preserved(self):
        """Structured data stays available next to the text."""
        error = CroissantMaxQuantityExceededError(8)
        assert isinstance(error, InvalidActionError)
        assert error.cause == ErrorCause.CROISSANT_MAX_QUANTITY_EXCEEDED
        assert error.cap == 8
        assert error.amount is None


class TestMessageEngine:
    """Test template loading."""

    def test_template_dir_overrides_inline(self, tmp_path):
        """Files in the template directory win over inline templates."""
        (tmp_path / 'rejections').mkdir()
        (tmp_path / 'rejections' / 'game_over.txt').write_text('The bakery is closed.\n')

        engine = MessageEngine(template_dir=tmp_path)

        assert engine.render('rejections/game_over.txt', {}) == 'The bakery is closed.'
        assert engine.render('rejections/no_cheese_to_sell.txt', {}) == 'You have no mature cheese to sell.'

    def test_money_filter(self, tmp_path):
        (tmp_path / 'balance.txt').write_text('You have ${{ money | money }}.')
        engine = MessageEngine(template_dir=tmp_path)
        assert engine.render('balance.txt', {'money': 705}) == 'You have $7.05.'

    def test_missing_template(self):
        engine = MessageEngine()
        assert engine.render('nope.txt', {}) == "[Template 'nope.txt' not found]"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
