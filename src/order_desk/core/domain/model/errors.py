from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(OrderError):
    pass


@dataclass(frozen=True)
class InvalidAmount(ValidationError):
    amount: float

    def __str__(self) -> str:
        return f"invalid_amount: {self.amount} ({self.message})"


@dataclass(frozen=True)
class DuplicateKey(OrderError):
    order_id: str

    def __str__(self) -> str:
        return f"duplicate_key: {self.order_id} ({self.message})"


@dataclass(frozen=True)
class OrderNotFound(OrderError):
    order_id: str

    def __str__(self) -> str:
        return f"order_not_found: {self.order_id} ({self.message})"
