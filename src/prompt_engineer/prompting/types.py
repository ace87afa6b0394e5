"""Value types shared by the offline generator."""

from enum import Enum
from typing import Union


class PromptType(str, Enum):
    """Prompt types offered by the generator form."""

    GENERAL = "general"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    MARKETING = "marketing"
    EDUCATIONAL = "educational"

    @classmethod
    def coerce(cls, value: Union[str, "PromptType", None]) -> "PromptType":
        """Map any value onto a known type, defaulting to GENERAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


class Classification(str, Enum):
    """Topic buckets recognised by the fallback generator."""

    UI_UX = "ui_ux"
    APP_DEV = "app_dev"
    WEB_DEV = "web_dev"
    NONE = "none"
