"""Importable parameter objects used by the config, bootstrap and CLI tests."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Annotated, List, Optional

from paramobject import Parameter

NOT_A_CLASS = 42


class OrderStatus(Enum):
    OPEN = "open"
    SHIPPED = "shipped"


@dataclass
class Money:
    amount: Decimal
    currency: str


@dataclass
class Customer:
    email: Annotated[str, Parameter(description="Customer e-mail", required=True)]
    country: Optional[str] = None


@dataclass
class OrderQuery:
    status: OrderStatus
    customer: Customer
    price: Money
    tags: List[str] = field(default_factory=list)


class Node:
    label: str
    child: "Node"


class Outer:
    class Inner:
        value: int
