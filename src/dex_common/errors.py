"""Validation error codes and exceptions.

Every error rejects the whole transaction; nothing is retried or recovered.
The numeric code doubles as the script exit status.

Code ranges:
  1-4:   Ledger accessor failures (structural)
  5-7:   Signature path (authorization)
  8-9:   Record/transaction shape (structural)
  10-15: Order conservation and price checks (economic)
  16:    Locator precondition (structural)
"""


class DexError(Exception):
    """Base validation error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 422,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1-4: Ledger accessors ---

class IndexOutOfBoundError(DexError):
    def __init__(self, detail: str = "Index out of bound") -> None:
        super().__init__(1, detail, 400)


class ItemMissingError(DexError):
    def __init__(self, detail: str = "Item missing") -> None:
        super().__init__(2, detail, 400)


class LengthNotEnoughError(DexError):
    def __init__(self, detail: str = "Length not enough") -> None:
        super().__init__(3, detail, 400)


class EncodingError(DexError):
    def __init__(self, detail: str = "Encoding error") -> None:
        super().__init__(4, detail, 400)


# --- 5-7: Signature path ---

class WrongPubkeyError(DexError):
    def __init__(self) -> None:
        super().__init__(5, "Recovered public key does not match script args", 422)


class LoadPrefilledDataError(DexError):
    def __init__(self, detail: str) -> None:
        super().__init__(6, f"Load prefilled data error: {detail}", 422)


class RecoverPubkeyError(DexError):
    def __init__(self, detail: str) -> None:
        super().__init__(7, f"Recover pubkey error: {detail}", 422)


# --- 8-9: Record and transaction shape ---

class WrongDataLengthOrFormatError(DexError):
    def __init__(self, length: int) -> None:
        super().__init__(8, f"Order data must be 16 or 57 bytes, got {length}", 400)


class InputsAndOutputsAmountNotSameError(DexError):
    def __init__(self, inputs: int, outputs: int) -> None:
        super().__init__(
            9,
            f"Inputs and outputs amount not same: {inputs} inputs, {outputs} outputs",
            400,
        )


# --- 10-15: Order checks ---

class WrongOrderTypeError(DexError):
    def __init__(self, order_type: int) -> None:
        super().__init__(10, f"Wrong order type: {order_type}", 422)


class OrderPriceNotZeroError(DexError):
    def __init__(self) -> None:
        super().__init__(11, "Order price must not be zero", 422)


class WrongSUDTInputAmountError(DexError):
    def __init__(self) -> None:
        super().__init__(12, "Input order has no undealt amount", 422)


class WrongSUDTDiffAmountError(DexError):
    def __init__(self, detail: str) -> None:
        super().__init__(13, f"Wrong sUDT diff amount: {detail}", 422)


class WrongDiffCapacityError(DexError):
    def __init__(self, input_capacity: int, output_capacity: int) -> None:
        super().__init__(
            14,
            f"Wrong diff capacity: input {input_capacity}, output {output_capacity}",
            422,
        )


class WrongSwapAmountError(DexError):
    def __init__(self, detail: str) -> None:
        super().__init__(15, f"Wrong swap amount: {detail}", 422)


# --- 16: Locator ---

class DuplicateOrderCellError(DexError):
    def __init__(self, first: int, second: int) -> None:
        super().__init__(
            16,
            f"More than one order cell matches script args: outputs {first} and {second}",
            400,
        )
