"""
Product models — the form-validation boundary.

Submissions are checked here before they reach the store: required name,
known category, non-negative price and stock, well-formed image URL.
Empty strings for optional fields mean "absent" and become None.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from engine.kernel.types import CATEGORIES, PAGE_SIZE_OPTIONS, PRODUCT_FIELDS

_URL = TypeAdapter(HttpUrl)


# ---------------------------------------------------------------------------
# Shared field checks
# ---------------------------------------------------------------------------


def _clean_name(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValueError("Product name is required")
    return value.strip()


def _clean_category(value: str | None) -> str:
    if value not in CATEGORIES:
        raise ValueError(f"Category must be one of {CATEGORIES}")
    return value


def _clean_optional(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _clean_image(value: str | None) -> str | None:
    value = _clean_optional(value)
    if value is None:
        return None
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError("Please enter a valid URL") from None
    return value


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


Name = Annotated[str, Field(max_length=200), AfterValidator(_clean_name)]
Category = Annotated[str, AfterValidator(_clean_category)]
Image = Annotated[str, AfterValidator(_clean_image)]
Description = Annotated[str, Field(max_length=2000), AfterValidator(_clean_optional)]


class ProductForm(BaseModel):
    """What the client sends to create or replace a product."""

    model_config = {"extra": "forbid"}

    name: Name
    category: Category = "Electronics"
    price: float = Field(default=0, ge=0)
    stock: int = Field(default=0, ge=0)
    image: Image | None = None
    description: Description | None = None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class ProductPatch(BaseModel):
    """Partial update. Only the fields the client sends are applied."""

    model_config = {"extra": "forbid"}

    name: Name | None = None
    category: Category | None = None
    price: float | None = Field(default=None, ge=0)
    stock: int | None = Field(default=None, ge=0)
    image: Image | None = None
    description: Description | None = None

    @field_validator("name", "category", "price", "stock")
    @classmethod
    def not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Value cannot be null")
        return value

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class FiltersRequest(BaseModel):
    """Filter changes. Omitted fields keep their current value."""

    model_config = {"extra": "forbid"}

    category: str | None = None
    in_stock_only: bool | None = None
    search_query: str | None = Field(default=None, max_length=200)

    @field_validator("category")
    @classmethod
    def known_category(cls, value: str | None) -> str | None:
        if value is None or value == "":
            return value
        return _clean_category(value)


class PageRequest(BaseModel):
    model_config = {"extra": "forbid"}

    page: int = Field(ge=1)


class PageSizeRequest(BaseModel):
    model_config = {"extra": "forbid"}

    items_per_page: int = Field(ge=1, le=max(PAGE_SIZE_OPTIONS))


class SortingRequest(BaseModel):
    """Replace sorting wholesale. A null or empty field means insertion order."""

    model_config = {"extra": "forbid"}

    field: str | None = None
    direction: Literal["asc", "desc"] = "asc"

    @field_validator("field")
    @classmethod
    def known_field(cls, value: str | None) -> str | None:
        if not value:
            return None
        if value not in PRODUCT_FIELDS:
            raise ValueError(f"Unknown sort field: {value}")
        return value


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ProductResponse(BaseModel):
    """What the API returns for a product."""

    id: str
    name: str
    category: str
    price: float
    stock: int
    image: str | None = None
    description: str | None = None
    created_at: str
    updated_at: str

    @classmethod
    def from_dict(cls, product: dict[str, Any]) -> ProductResponse:
        return cls(**{key: product.get(key) for key in PRODUCT_FIELDS})


class SelectionResponse(BaseModel):
    selected_products: list[str]


class ViewResponse(BaseModel):
    """The displayed page plus the parameters that produced it."""

    items: list[ProductResponse]
    total_items: int
    total_pages: int
    current_page: int
    items_per_page: int
    all_on_page_selected: bool
    filters: dict[str, Any]
    sorting: dict[str, Any]
    selected_products: list[str]


class CategoryShare(BaseModel):
    category: str
    count: int
    percentage: float


class StatsResponse(BaseModel):
    total_products: int
    selected_count: int
    total_units: int
    inventory_value: float
    low_stock_count: int
    out_of_stock_count: int
    categories: list[CategoryShare]
