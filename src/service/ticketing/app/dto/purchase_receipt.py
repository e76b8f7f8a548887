"""Purchase receipt DTO."""

import attrs


@attrs.define(frozen=True)
class PurchaseReceipt:
    """What was reserved and charged for a successful ticket purchase."""

    account_id: int
    seats_reserved: int
    total_price: int
