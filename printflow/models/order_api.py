"""
Order backend wire models
Responsibility: tolerate both payload shapes served by the order backend

`GET /api/orders/:id` answers in camelCase with nested `sizes`, while the
legacy list endpoint answers in snake_case with flat `size_*` columns and
money as strings. Every field has a default so that absent or null values
never reach the domain.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

# Nested size key -> flat legacy column
FLAT_SIZE_COLUMNS: dict[str, str] = {
    "xs": "size_xs",
    "s": "size_s",
    "m": "size_m",
    "l": "size_l",
    "xl": "size_xl",
    "xxl": "size_2_xl",
    "xxxl": "size_3_xl",
    "xxxxl": "size_4_xl",
    "xxxxxl": "size_5_xl",
    "other": "size_other",
}


def _to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


class OrderApiBaseModel(BaseModel):
    """Base model for order backend payloads"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BackendSizes(OrderApiBaseModel):
    """Per-size quantities"""

    xs: int = 0
    s: int = 0
    m: int = 0
    l: int = 0  # noqa: E741
    xl: int = 0
    xxl: int = 0
    xxxl: int = 0
    xxxxl: int = 0
    xxxxxl: int = 0
    other: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def none_as_zero(cls, v):
        return v or 0


class BackendLineItem(OrderApiBaseModel):
    """Line item in either the detail or the list shape"""

    id: int | str | None = None
    style_number: str = Field(default="", validation_alias=AliasChoices("styleNumber", "style_number"))
    description: str = Field(default="", validation_alias=AliasChoices("description", "style_description"))
    color: str = ""
    category: str = ""
    unit_cost: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("unitCost", "unit_cost"))
    total_quantity: int = Field(default=0, validation_alias=AliasChoices("totalQuantity", "total_quantity"))
    total_cost: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("totalCost", "total_cost"))
    sizes: BackendSizes = Field(default_factory=BackendSizes)

    @model_validator(mode="before")
    @classmethod
    def collect_flat_sizes(cls, data: Any) -> Any:
        """Fold flat `size_*` columns into a nested `sizes` object."""
        if isinstance(data, dict) and not data.get("sizes"):
            flat = {key: data.get(column) for key, column in FLAT_SIZE_COLUMNS.items() if column in data}
            if flat:
                data = {**data, "sizes": flat}
        return data

    @field_validator("unit_cost", "total_cost", mode="before")
    @classmethod
    def parse_money(cls, v):
        return _to_decimal(v)

    @field_validator("style_number", "description", "color", "category", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("total_quantity", mode="before")
    @classmethod
    def none_as_zero(cls, v):
        return v or 0


class BackendStatusHistoryEntry(OrderApiBaseModel):
    """Audit row"""

    status: str = ""
    previous_status: str | None = None
    changed_by: str | None = None
    changed_at: str | None = None


class BackendCustomer(OrderApiBaseModel):
    """Customer reference"""

    id: int | str | None = None
    name: str | None = None
    email: str = ""
    phone: str = ""
    company: str = ""

    @field_validator("email", "phone", "company", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


class BackendOrder(OrderApiBaseModel):
    """Order in either the detail or the list shape"""

    id: int | str
    order_number: str | None = Field(default=None, validation_alias=AliasChoices("orderNumber", "order_number"))
    order_nickname: str = Field(default="", validation_alias=AliasChoices("orderNickname", "order_nickname"))
    status: str | None = None
    printavo_status_name: str | None = Field(
        default=None, validation_alias=AliasChoices("printavoStatusName", "printavo_status_name")
    )
    total_amount: Decimal = Field(default=Decimal("0"), validation_alias=AliasChoices("totalAmount", "total_amount"))
    amount_outstanding: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("amountOutstanding", "amount_outstanding")
    )
    due_date: str | None = Field(default=None, validation_alias=AliasChoices("dueDate", "due_date"))
    customer_due_date: str | None = Field(
        default=None, validation_alias=AliasChoices("customerDueDate", "customer_due_date")
    )
    status_history: list[BackendStatusHistoryEntry] = Field(
        default_factory=list, validation_alias=AliasChoices("statusHistory", "status_history")
    )
    customer: BackendCustomer | None = None
    customer_name: str | None = None
    line_items: list[BackendLineItem] = Field(
        default_factory=list, validation_alias=AliasChoices("lineItems", "line_items")
    )

    @field_validator("total_amount", mode="before")
    @classmethod
    def parse_total(cls, v):
        return _to_decimal(v)

    @field_validator("amount_outstanding", mode="before")
    @classmethod
    def parse_outstanding(cls, v):
        return None if v is None or v == "" else _to_decimal(v)

    @field_validator("order_nickname", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("status_history", "line_items", mode="before")
    @classmethod
    def none_as_list(cls, v):
        return [] if v is None else v

    @field_validator("status_history", mode="before")
    @classmethod
    def drop_legacy_history(cls, v):
        """The legacy list shape carries history as bare strings."""
        if isinstance(v, list):
            return [entry for entry in v if isinstance(entry, dict)]
        return v

    @property
    def display_status(self) -> str | None:
        return self.printavo_status_name or self.status

    @property
    def display_customer_name(self) -> str | None:
        if self.customer and self.customer.name:
            return self.customer.name
        return self.customer_name


class BackendOrdersPage(OrderApiBaseModel):
    """Paginated list response"""

    total: int = 0
    page: int = 1
    limit: int = 0
    orders: list[BackendOrder] = Field(default_factory=list)
