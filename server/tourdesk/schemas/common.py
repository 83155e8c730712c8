"""Common Pydantic schemas."""

from decimal import Decimal
from typing import Annotated, Any, ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

CENTS = Decimal("0.01")


def _format_money(value: Decimal) -> str:
    return str(value.quantize(CENTS))


# Non-negative amount with at most two fractional digits, sent as "123.45"
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=12, decimal_places=2),
    PlainSerializer(_format_money, return_type=str, when_used="json"),
]

# Same wire format, but may be negative (e.g. a loss)
SignedMoney = Annotated[
    Decimal,
    PlainSerializer(_format_money, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire while accepting snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)


class PartialUpdate(CamelModel):
    """
    Base for partial-update requests.

    Every field is optional so it can be omitted; only fields listed in
    ``nullable_fields`` may be explicitly cleared with null.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"Field '{to_camel(name)}' cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="JSON path to the invalid field")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Human-readable outcome")
