# src/dex_ledger/domain/repository.py
"""LedgerReader Protocol: read-only accessors the host ledger runtime provides.

Every accessor may raise IndexOutOfBoundError, ItemMissingError,
LengthNotEnoughError or EncodingError; callers propagate them untouched.
"""
from typing import Protocol

from src.dex_common.enums import CellSource


class LedgerReader(Protocol):
    def load_script_args(self) -> bytes: ...

    def input_count(self) -> int: ...

    def output_count(self) -> int: ...

    def load_output_lock_args(self, index: int) -> bytes: ...

    def load_cell_capacity(self, index: int, source: CellSource) -> int: ...

    def load_cell_data(self, index: int, source: CellSource) -> bytes: ...

    def witness_count(self) -> int: ...

    def load_witness_input_type(self, index: int) -> bytes | None: ...
