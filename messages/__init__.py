"""
Message templates for the Croissant Game.

Jinja2-based templates for the player-facing text of rejected actions.
"""

from pathlib import Path
from typing import Dict, Any, Optional
from jinja2 import Environment, ChoiceLoader, DictLoader, FileSystemLoader, Template, TemplateNotFound


def format_money(cents: int) -> str:
    """Format integer cents as <whole>.<hundredths>, e.g. 1234 -> '12.34'."""
    sign = '-' if cents < 0 else ''
    whole, hundredths = divmod(abs(int(cents)), 100)
    return f"{sign}{whole}.{hundredths:02d}"


class MessageEngine:
    """
    Jinja2 message template engine.

    Templates found in template_dir take precedence over the inline
    DEFAULT_TEMPLATES, so wording can be changed without touching code.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir

        loader = DictLoader(DEFAULT_TEMPLATES)
        if self.template_dir is not None and self.template_dir.exists():
            loader = ChoiceLoader([FileSystemLoader(str(self.template_dir)), loader])

        self.env = Environment(
            loader=loader,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Register custom filters
        self.env.filters['money'] = format_money

    def load_template(self, template_name: str) -> Optional[Template]:
        """Load a Jinja2 template by name, or None if it does not exist."""
        try:
            return self.env.get_template(template_name)
        except TemplateNotFound:
            return None

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        template = self.load_template(template_name)
        if template is None:
            return f"[Template '{template_name}' not found]"
        return template.render(**context).strip()


# =============================================================================
# INLINE TEMPLATES
# One per rejection cause, keyed by the cause value.
# =============================================================================

DEFAULT_TEMPLATES = {
    'rejections/invalid_action.txt': 'Invalid action.',
    'rejections/invalid_quantity.txt': 'Action requires a quantity greater than 0.',
    'rejections/extraneous_quantity.txt': 'Action should not have a quantity.',
    'rejections/game_over.txt': 'Game is over.',
    'rejections/not_enough_money.txt': 'Not enough money, need at least ${{ amount | money }}.',
    'rejections/cheese_max_quantity_exceeded.txt': 'Cannot buy that much cheese (max {{ cap }}).',
    'rejections/no_cheese_to_sell.txt': 'You have no mature cheese to sell.',
    'rejections/croissant_max_quantity_exceeded.txt': 'Cannot buy that many croissants (max {{ cap }}).',
}


# Global message engine instance
_engine: Optional[MessageEngine] = None


def get_message_engine() -> MessageEngine:
    """Get or create the global message engine."""
    global _engine
    if _engine is None:
        _engine = MessageEngine()
    return _engine


def render_message(template_name: str, context: Dict[str, Any]) -> str:
    """Convenience function to render a template."""
    return get_message_engine().render(template_name, context)
