"""HomeService — resolve standard home directories for the CLI."""

from __future__ import annotations

import logging
import warnings

from beltkit.domain.errors import ResolutionDegenerate
from beltkit.domain.homes import (
    FALLBACK_SOURCE,
    HOME_VAR,
    home_is_degenerate,
    resolve_home_with_source,
)
from beltkit.domain.types import HomeKind
from beltkit.services.base import BaseService
from beltkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


class HomeService(BaseService):
    """Resolves :class:`HomeKind` paths against the settings' environment."""

    def _degenerate_warnings(self, kinds: list[HomeKind]) -> list[str]:
        env = self.settings.env
        if not home_is_degenerate(env):
            return []
        fallback_kinds = [
            k for k in kinds if resolve_home_with_source(k, env)[1] == FALLBACK_SOURCE
        ]
        if not fallback_kinds:
            return []
        names = ", ".join(fallback_kinds)
        msg = f"{HOME_VAR} is unset; fallback paths are degenerate ({names})"
        warnings.warn(msg, ResolutionDegenerate, stacklevel=3)
        logger.warning(msg)
        return [msg]

    def resolve(self, kind: HomeKind) -> ServiceResult:
        """Resolve one home directory, reporting which layer won."""
        path, source = resolve_home_with_source(kind, self.settings.env)
        return ServiceResult(
            ok=True,
            op="resolve_home",
            data={"kind": str(kind), "path": path, "source": source},
            warnings=self._degenerate_warnings([kind]),
        )

    def resolve_all(self) -> ServiceResult:
        """Resolve every home directory."""
        kinds = list(HomeKind)
        env = self.settings.env
        homes = {str(k): resolve_home_with_source(k, env)[0] for k in kinds}
        return ServiceResult(
            ok=True,
            op="resolve_homes",
            data={"homes": homes},
            warnings=self._degenerate_warnings(kinds),
        )
