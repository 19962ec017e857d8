"""Shared test fixtures."""

import pytest

from src.dex_ledger.domain.models import TransactionSnapshot
from tests.factories import matched_transaction


@pytest.fixture
def matched_tx() -> TransactionSnapshot:
    return matched_transaction()
