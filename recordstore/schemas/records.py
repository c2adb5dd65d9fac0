"""Record Schemas — example record types that satisfy the identity contract.

Invariants:
    - Every model is frozen: stored records are values, changed only by replacement
    - Blank records use an id outside the valid domain (0 for customers, "" for products)
    - Blank records are inactive

Design Decisions:
    - Pydantic models: equality, copying and JSON dumps come for free
    - blank() classmethods keep the sentinel next to the type it belongs to;
      model_construct skips validation so the sentinel id can sit outside the domain
"""

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Customer record keyed by a positive integer."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    active: bool = True
    name: str = ""
    email: str | None = None

    @classmethod
    def blank(cls) -> "Customer":
        return cls.model_construct(id=0, active=False)


class Product(BaseModel):
    """Product record keyed by an alphanumeric code."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(pattern=r"^[A-Za-z0-9-]+$")
    active: bool = True
    description: str = ""
    price_cents: int = Field(0, ge=0)

    @classmethod
    def blank(cls) -> "Product":
        return cls.model_construct(id="", active=False)
