"""
strvalidator Messages Module

Default error messages for the built-in rules. A catalog is a frozen
pydantic model with one field per rule kind; templates take positional
`str.format` placeholders that receive the rule's condition values.

The process-wide catalog is read by the rule factories at the moment a
rule is created. Replacing it later only affects rules created afterwards.
"""

import logging
from typing import Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Messages(BaseModel):
    """
    Catalog of default error messages, one per built-in rule kind.

    Subclass and override the defaults to provide another language, or
    build one from a mapping with `Messages.model_validate(...)`.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    required: str = Field(default="Required", min_length=1)
    length: str = Field(default="It requires {} characters", description="Receives the exact length")
    min_length: str = Field(default="Minimum {} characters", description="Receives the minimum length")
    max_length: str = Field(default="Maximum {} characters", description="Receives the maximum length")
    email: str = Field(default="Email invalid")
    numeric_format: str = Field(default="It is not a number")
    should_only_contain: str = Field(
        default="They are just admitted the following characters {}",
        description="Receives the allowed characters"
    )
    only_numbers: str = Field(default="Only numbers")
    not_contain: str = Field(
        default="The following characters aren't admitted {}",
        description="Receives the rejected characters"
    )
    must_contain_one: str = Field(
        default="At least one of the following characters is required: {}",
        description="Receives the wanted characters"
    )
    must_contain_minimum: str = Field(
        default="At least {} of the following characters are required: {}",
        description="Receives the minimum count, then the wanted characters"
    )
    reg_exp: str = Field(
        default="The value does not match the regular expression {}",
        description="Receives the pattern"
    )
    not_match: str = Field(default="Not match", description="Used when compared strings differ")


class MessagesEn(Messages):
    """English catalog. The out-of-the-box default."""


class MessagesEs(Messages):
    """Spanish catalog."""

    required: str = "Requerido"
    length: str = "Se requiere {} caracteres"
    min_length: str = "Mínimo {} caracteres"
    max_length: str = "Máximo {} caracteres"
    email: str = "Email invalido"
    numeric_format: str = "No es un número"
    should_only_contain: str = "Solo se admiten los siguientes caracteres {}"
    only_numbers: str = "Solo números"
    not_contain: str = "No se admiten los siguientes caracteres {}"
    must_contain_one: str = "Se requiere al menos uno de los siguientes caracteres: {}"
    must_contain_minimum: str = "Se requiere al menos {} de los siguientes caracteres: {}"
    reg_exp: str = "El valor no coincide con la expresión regular {}"
    not_match: str = "No coinciden"


MESSAGE_CATALOGS: Dict[str, Type[Messages]] = {
    "en": MessagesEn,
    "es": MessagesEs,
}

_messages: Messages = MessagesEn()


def messages_for_locale(locale: str) -> Messages:
    """
    Instantiate the built-in catalog for a locale.

    Args:
        locale: Language code, e.g. "en" or "es" (case-insensitive)

    Returns:
        A fresh catalog instance

    Raises:
        ValueError: If no catalog exists for the locale
    """
    catalog_cls = MESSAGE_CATALOGS.get(locale.lower())
    if catalog_cls is None:
        available = ", ".join(sorted(MESSAGE_CATALOGS))
        raise ValueError(f"Unknown locale '{locale}'. Available: {available}")
    return catalog_cls()


def get_messages() -> Messages:
    """Return the process-wide catalog."""
    return _messages


def set_messages(messages: Optional[Messages]) -> None:
    """
    Replace the process-wide catalog.

    Rules and validators created before the call keep the messages they
    captured. Passing None leaves the current catalog in place.
    """
    global _messages
    if messages is None:
        return
    _messages = messages
    logger.info("Message catalog set to %s", type(messages).__name__)


def reset_messages() -> None:
    """Restore the English catalog."""
    set_messages(MessagesEn())
