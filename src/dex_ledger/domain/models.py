"""Transaction snapshot: immutable in-memory LedgerReader implementation."""
from dataclasses import dataclass

from src.dex_common.enums import CellSource
from src.dex_common.errors import IndexOutOfBoundError, ItemMissingError


@dataclass(frozen=True)
class Cell:
    capacity: int  # shannons
    lock_args: bytes
    data: bytes = b""


@dataclass(frozen=True)
class Witness:
    # None when the witness carries no input_type field
    input_type: bytes | None = None


@dataclass(frozen=True)
class TransactionSnapshot:
    """One transaction as seen by the invoking script.

    script_args belong to the script being validated; witnesses are the
    script group's witnesses, index 0 first.
    """

    script_args: bytes
    inputs: tuple[Cell, ...] = ()
    outputs: tuple[Cell, ...] = ()
    witnesses: tuple[Witness, ...] = ()

    def load_script_args(self) -> bytes:
        return self.script_args

    def input_count(self) -> int:
        return len(self.inputs)

    def output_count(self) -> int:
        return len(self.outputs)

    def load_output_lock_args(self, index: int) -> bytes:
        return self._cell(index, CellSource.OUTPUT).lock_args

    def load_cell_capacity(self, index: int, source: CellSource) -> int:
        return self._cell(index, source).capacity

    def load_cell_data(self, index: int, source: CellSource) -> bytes:
        return self._cell(index, source).data

    def witness_count(self) -> int:
        return len(self.witnesses)

    def load_witness_input_type(self, index: int) -> bytes | None:
        if not (0 <= index < len(self.witnesses)):
            raise ItemMissingError(f"Witness {index} missing")
        return self.witnesses[index].input_type

    def _cell(self, index: int, source: CellSource) -> Cell:
        cells = self.inputs if source == CellSource.INPUT else self.outputs
        if not (0 <= index < len(cells)):
            raise IndexOutOfBoundError(f"{source.value} index {index} out of bound")
        return cells[index]
