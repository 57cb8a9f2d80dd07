from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_OFFICE_SSID
from ..core.exceptions import ValidationError
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

OFFICE_SSID_KEY = "office_ssid"
MAX_SSID_LENGTH = 255


class SettingsService:
    """Office-level settings an admin may change at runtime."""

    def __init__(self, settings: SettingsRepository, *, default_office_ssid: str = DEFAULT_OFFICE_SSID):
        self._settings = settings
        self._default_office_ssid = default_office_ssid

    def get_office_ssid(self) -> str:
        return self._settings.get(OFFICE_SSID_KEY) or self._default_office_ssid

    def update_office_ssid(self, value: str) -> str:
        ssid = require_non_empty(value, "Office SSID")
        if len(ssid) > MAX_SSID_LENGTH:
            raise ValidationError(f"Office SSID must be at most {MAX_SSID_LENGTH} characters")
        self._settings.set(OFFICE_SSID_KEY, ssid)
        logger.info("office SSID updated to %r", ssid)
        return ssid
