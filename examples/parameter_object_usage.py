"""
Example: Flattening a parameter object for API documentation.

This shows the separation between:
- Registration phase: decide which classes are leaf parameters (once, at startup)
- Extraction: walk a parameter object class and list its documented parameters
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, List, Optional

from paramobject import Parameter, SimpleTypeRegistry, extract_from, register_simple_type


@register_simple_type
@dataclass
class Money:
    amount: Decimal
    currency: str


@dataclass
class Address:
    city: Annotated[str, Parameter(description="City name", required=True)]
    zip_code: Optional[str] = None


@dataclass
class SearchQuery:
    text: Annotated[str, Parameter(description="Full-text search", required=True)]
    address: Address
    max_price: Optional[Money] = None
    tags: List[str] = field(default_factory=list)


# =============================================================================
# Example 1: Money is registered as simple, Address is walked
# =============================================================================
for parameter in extract_from(SearchQuery):
    print(f"{parameter.name:<16} required={parameter.required!s:<5} nullable={parameter.nullable}")

# text             required=True  nullable=False
# address.city     required=True  nullable=False
# address.zip_code required=False nullable=True
# max_price        required=False nullable=True
# tags             required=False nullable=True


# =============================================================================
# Example 2: Registering Address turns the nested object into one parameter
# =============================================================================
SimpleTypeRegistry.add_simple_types(Address)
print([parameter.name for parameter in extract_from(SearchQuery)])
# ['text', 'address', 'max_price', 'tags']
