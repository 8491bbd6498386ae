"""
strvalidator Configuration Module

Provides process-wide configuration: which message catalog the rule
factories read by default and how verbose the library logs. Configuration
can be loaded from environment variables or passed directly.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .messages import Messages, messages_for_locale, set_messages

logger = logging.getLogger(__name__)


@dataclass
class ValidatorConfig:
    """
    Configuration for strvalidator.

    Attributes:
        locale: Built-in message catalog to install (en, es)
        log_level: Level of the "strvalidator" logger (debug, info, warning, error)
        mismatch_message: Replaces the catalog's mismatch message when set
    """
    locale: str = "en"
    log_level: str = "warning"
    mismatch_message: Optional[str] = None

    # Additional configuration storage
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = "STRVALIDATOR_") -> "ValidatorConfig":
        """
        Load configuration from environment variables.

        Example: STRVALIDATOR_LOCALE -> locale
        """
        config = cls()

        env_mappings = {
            f"{prefix}LOCALE": "locale",
            f"{prefix}LOG_LEVEL": "log_level",
            f"{prefix}MISMATCH_MESSAGE": "mismatch_message",
        }

        for env_var, attr_name in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                config.set_attr(attr_name, value)

        return config

    def set_attr(self, name: str, value: Any) -> None:
        """Set a configuration attribute dynamically."""
        if hasattr(self, name):
            setattr(self, name, value)
        else:
            self.extra[name] = value

    def messages(self) -> Messages:
        """
        Build the catalog described by this configuration.

        Raises:
            ValueError: If the locale has no built-in catalog
        """
        catalog = messages_for_locale(self.locale)
        if self.mismatch_message is not None:
            catalog = catalog.model_copy(update={"not_match": self.mismatch_message})
        return catalog

    def apply(self) -> Messages:
        """
        Install this configuration process-wide.

        Validators and rules created earlier keep the messages they
        captured.

        Returns:
            The installed catalog

        Raises:
            ValueError: If the locale or log level is unknown
        """
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        catalog = self.messages()
        logging.getLogger("strvalidator").setLevel(level)
        set_messages(catalog)
        return catalog

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "locale": self.locale,
            "log_level": self.log_level,
            "mismatch_message": self.mismatch_message,
            "extra": self.extra
        }


# Default configuration instance
default_config = ValidatorConfig()
