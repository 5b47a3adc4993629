"""ToolService — the small stateless helpers exposed on the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from beltkit.domain.errors import EntropySourceUnavailable
from beltkit.domain.fields import split_fields
from beltkit.domain.ids import generate_identifier
from beltkit.domain.numbers import sum_numbers, to_int
from beltkit.infrastructure.system import mime_type, which
from beltkit.services.base import BaseService
from beltkit.services.result import ServiceResult


class ToolService(BaseService):
    """Identifier, field, lookup and arithmetic operations."""

    def generate_ids(self, count: int = 1) -> ServiceResult:
        op = "generate_id"
        if count < 1:
            return ServiceResult.failure(op, "INVALID_COUNT", f"Count must be >= 1, got {count}")
        try:
            ids = [generate_identifier() for _ in range(count)]
        except EntropySourceUnavailable as exc:
            return ServiceResult.failure(op, exc.code, str(exc))
        if count == 1:
            return ServiceResult(ok=True, op=op, data={"id": ids[0]})
        return ServiceResult(ok=True, op=op, data={"items": [{"id": i} for i in ids]})

    def split(self, lines: Sequence[str], delimiter: str) -> ServiceResult:
        """Split each line; ``rows`` keeps one field list per input line."""
        op = "split_fields"
        try:
            rows = [split_fields(line, delimiter) for line in lines]
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_DELIMITER", str(exc))
        return ServiceResult(ok=True, op=op, data={"rows": rows, "count": len(rows)})

    def which(self, names: Sequence[str]) -> ServiceResult:
        """Locate executables; fails if any is missing."""
        op = "which"
        found = {name: which(name) for name in names}
        missing = [name for name, path in found.items() if path is None]
        if missing:
            return ServiceResult.failure(
                op,
                "COMMAND_NOT_FOUND",
                f"Not found: {', '.join(missing)}",
                missing=missing,
                commands=found,
            )
        return ServiceResult(ok=True, op=op, data={"commands": found})

    def mime(self, paths: Sequence[Path | str]) -> ServiceResult:
        types = {str(p): mime_type(p) for p in paths}
        return ServiceResult(ok=True, op="mime_type", data={"types": types})

    def sum(self, values: Sequence[str], *, as_int: bool = False) -> ServiceResult:
        op = "sum"
        try:
            total = sum_numbers(values)
            if as_int:
                total = to_int(total)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_NUMBER", str(exc))
        return ServiceResult(ok=True, op=op, data={"total": total, "count": len(values)})
