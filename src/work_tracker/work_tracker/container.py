from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .clock.json_pending_store import JsonFilePendingStore
from .clock.service import ClockService
from .ledger.markdown_ledger_repository import MarkdownLedgerRepository
from .ledger.service import LedgerService
from .worktime.calculator.standard_calculator import StandardWorktimeCalculator
from .worktime.model import WorkRules


@dataclass(frozen=True)
class Container:
    rules: WorkRules
    calculator: StandardWorktimeCalculator

    ledger_repo: MarkdownLedgerRepository
    pending_store: JsonFilePendingStore

    ledger_service: LedgerService
    clock_service: ClockService


def build_container(*, ledger_dir: Path | str, state_file: Path | str, rules: Optional[Mapping] = None) -> Container:
    work_rules = WorkRules.from_mapping(rules or {})
    calculator = StandardWorktimeCalculator(work_rules)

    ledger_repo = MarkdownLedgerRepository(ledger_dir)
    pending_store = JsonFilePendingStore(state_file)

    ledger_service = LedgerService(ledger_repo)
    clock_service = ClockService(calculator, ledger_service, pending_store)

    return Container(
        rules=work_rules,
        calculator=calculator,
        ledger_repo=ledger_repo,
        pending_store=pending_store,
        ledger_service=ledger_service,
        clock_service=clock_service,
    )
