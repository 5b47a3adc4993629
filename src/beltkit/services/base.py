"""BaseService — shared foundation for beltkit services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beltkit.config.settings import BeltSettings


class BaseService:
    """Base for service-layer classes.

    Services read configuration, including the environment mapping used
    for home resolution, from the settings object only.
    """

    def __init__(self, settings: BeltSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> BeltSettings:
        return self._settings
