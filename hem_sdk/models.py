# hem_sdk/models.py
from dataclasses import dataclass, asdict
from typing import Callable


@dataclass
class Offset:
    seller: str
    price: int
    hem_approved: bool
    user_approved: bool

    @classmethod
    def from_result(cls, values: tuple, to_account: Callable[[str], str] = str) -> "Offset":
        """`values` is a decoded getOffset() tuple (address, uint256, bool, bool)."""
        seller, price, hem_approved, user_approved = values
        return cls(
            seller=to_account(seller),
            price=int(price),
            hem_approved=bool(hem_approved),
            user_approved=bool(user_approved),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PurchaseWhitelistEntry:
    buyer: str
    price: int
    hem_approved: bool

    @classmethod
    def from_result(cls, values: tuple, to_account: Callable[[str], str] = str) -> "PurchaseWhitelistEntry":
        buyer, price, hem_approved = values
        return cls(buyer=to_account(buyer), price=int(price), hem_approved=bool(hem_approved))

    def to_dict(self) -> dict:
        return asdict(self)
