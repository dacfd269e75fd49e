from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Python attributes are snake_case; JSON keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class InventoryItem(CamelModel):
    id: str
    name: str
    category: str
    quantity: float
    unit: str
    min_stock: float
    price: float
    supplier: str = ""
    last_updated: str

    @computed_field(alias="lowStock")
    @property
    def low_stock(self) -> bool:
        return self.quantity <= self.min_stock


class ItemCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    quantity: float
    unit: str = Field(..., min_length=1, max_length=50)
    min_stock: float
    price: float
    supplier: str = Field("", max_length=255)

    @field_validator("supplier", mode="before")
    @classmethod
    def blank_supplier(cls, value):
        return value or ""


class ItemUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    quantity: Optional[float] = None
    unit: Optional[str] = Field(None, min_length=1, max_length=50)
    min_stock: Optional[float] = None
    price: Optional[float] = None
    supplier: Optional[str] = Field(None, max_length=255)


class InventorySummary(CamelModel):
    total_items: int
    low_stock_count: int
    categories_count: int
    categories: list[str]
    total_value: float


class ItemResponse(BaseModel):
    success: bool = True
    data: InventoryItem


class ItemListResponse(BaseModel):
    success: bool = True
    data: list[InventoryItem]


class SummaryResponse(BaseModel):
    success: bool = True
    data: InventorySummary


class ItemDeleteResponse(BaseModel):
    success: bool = True
    message: str
