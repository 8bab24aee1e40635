from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core.exceptions import LedgerWriteError
from .markdown import parse_ledger, render_ledger
from .model import MonthLedger, ParseResult

logger = logging.getLogger(__name__)


class MarkdownLedgerRepository:
    """One ``YYYY-MM.md`` document per month inside ``root_dir``.

    Note: Every save rebuilds the whole document and swaps it in with
    ``os.replace``, so a failed write leaves the previous file untouched.
    """

    def __init__(self, root_dir: Path | str):
        self._root = Path(root_dir).expanduser()

    @property
    def root_dir(self) -> Path:
        return self._root

    def path_for(self, month: str) -> Path:
        return self._root / f"{month}.md"

    def exists(self, month: str) -> bool:
        return self.path_for(month).is_file()

    def load(self, month: str) -> ParseResult:
        path = self.path_for(month)
        if not path.is_file():
            return ParseResult(ledger=MonthLedger(month=month))

        result = parse_ledger(path.read_text(encoding="utf-8", errors="replace"), month)
        if result.skipped_lines:
            logger.warning("Skipped %d unparseable row(s) in %s", result.skipped_lines, path)
        return result

    def save(self, ledger: MonthLedger) -> Path:
        path = self.path_for(ledger.month)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise LedgerWriteError(f"Cannot create ledger directory {self._root}: {exc}") from exc

        content = render_ledger(ledger)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{ledger.month}.", suffix=".tmp", dir=self._root)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise LedgerWriteError(f"Cannot write ledger {path}: {exc}") from exc

        logger.info("Wrote %d record(s) to %s", len(ledger), path)
        return path
