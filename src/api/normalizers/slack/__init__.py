"""Normalizer Slack: payload bruto -> BackgroundEvent | Command | Action | ViewSubmission.

Tipos de campo de formulário suportados: plain_text_input, users_select,
conversations_select, static_select, radio_buttons, multi_users_select,
multi_conversations_select, multi_static_select, checkboxes, datepicker,
timepicker.
"""

from ._extraction_helpers import FIELD_EXTRACTORS, extract_form_values
from .normalizer import SlackEventNormalizer, normalize, parse_action_element

__all__ = [
    "FIELD_EXTRACTORS",
    "SlackEventNormalizer",
    "extract_form_values",
    "normalize",
    "parse_action_element",
]
