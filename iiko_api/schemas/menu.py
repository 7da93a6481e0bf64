"""External menu records (``/api/2/menu`` and ``/api/2/menu/by_id``).

Nesting of a menu document:

    GetMenuByIdResponse
      itemCategories[] -> ItemCategory
        items[] -> MenuItem
          itemSizes[] -> ItemSize
            prices[] -> ItemPrice
            itemModifierGroups[] -> ItemModifierGroup -> items[] -> MenuItem
            nutritionPerHundredGrams / nutritions[] -> Nutrition

Nullable wire fields are Optional and keep explicit nulls when dumped with
``to_wire()``.
"""
from __future__ import annotations
from typing import List, Optional

from pydantic import Field

from .common import IikoModel, IikoRequest


class GetMenuRequest(IikoRequest):
    organization_ids: List[str]


class ExternalMenu(IikoModel):
    id: str
    name: str


class PriceCategory(IikoModel):
    id: str
    name: str


class GetMenuResponse(IikoModel):
    correlation_id: str
    external_menus: List[ExternalMenu] = Field(default_factory=list)
    price_categories: List[PriceCategory] = Field(default_factory=list)


class GetMenuByIdRequest(IikoRequest):
    external_menu_id: str
    organization_ids: List[str]


class ProductCategory(IikoModel):
    id: str
    name: str
    is_deleted: bool = False


class CustomerTagGroup(IikoModel):
    id: str
    name: str


class MenuInterval(IikoModel):
    id: str
    name: str


class Schedule(IikoModel):
    id: str
    name: str


class ComboCategory(IikoModel):
    id: str
    name: str


class Nutrition(IikoModel):
    fats: Optional[float] = None
    proteins: Optional[float] = None
    carbs: Optional[float] = None
    energy: Optional[float] = None
    organizations: List[str] = Field(default_factory=list)
    saturated_fatty_acid: Optional[float] = None
    salt: Optional[float] = None
    sugar: Optional[float] = None


class ItemPrice(IikoModel):
    organization_id: str
    price: Optional[float] = None


class ItemModifierGroup(IikoModel):
    id: Optional[str] = None
    name: str
    min_quantity: int = 0
    max_quantity: int = 0
    items: List[MenuItem] = Field(default_factory=list)


class ItemSize(IikoModel):
    sku: Optional[str] = None
    size_code: Optional[str] = None
    size_name: Optional[str] = None
    is_default: bool = False
    portion_weight_grams: Optional[float] = None
    item_modifier_groups: List[ItemModifierGroup] = Field(default_factory=list)
    size_id: Optional[str] = None
    nutrition_per_hundred_grams: Optional[Nutrition] = None
    prices: List[ItemPrice] = Field(default_factory=list)
    nutritions: List[Nutrition] = Field(default_factory=list)
    is_hidden: bool = False
    measure_unit_type: Optional[str] = None
    button_image_url: Optional[str] = None


class MenuItem(IikoModel):
    sku: Optional[str] = None
    name: str
    description: Optional[str] = None
    allergens: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)
    item_sizes: List[ItemSize] = Field(default_factory=list)
    item_id: str
    modifier_schema_id: Optional[str] = None
    tax_category: Optional[str] = None
    modifier_schema_name: Optional[str] = None
    type: str  # DISH, MODIFIER, PRODUCT or a newer value
    can_be_divided: bool = False
    can_set_open_price: bool = False
    use_balance_for_sell: bool = False
    measure_unit: Optional[str] = None
    product_category_id: Optional[str] = None
    customer_tag_groups: List[CustomerTagGroup] = Field(default_factory=list)
    payment_subject: Optional[str] = None
    payment_subject_code: Optional[str] = None
    outer_ean_code: Optional[str] = None
    is_marked: bool = False
    is_hidden: bool = False
    barcodes: List[str] = Field(default_factory=list)
    order_item_type: Optional[str] = None


class ItemCategory(IikoModel):
    id: str
    name: str
    description: Optional[str] = None
    button_image_url: Optional[str] = None
    header_image_url: Optional[str] = None
    iiko_group_id: Optional[str] = None
    items: List[MenuItem] = Field(default_factory=list)
    schedule_id: Optional[str] = None
    schedule_name: Optional[str] = None
    schedules: List[Schedule] = Field(default_factory=list)
    is_hidden: bool = False
    tags: List[str] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)


class GetMenuByIdResponse(IikoModel):
    product_categories: List[ProductCategory] = Field(default_factory=list)
    customer_tag_groups: List[CustomerTagGroup] = Field(default_factory=list)
    revision: int
    format_version: int
    id: int
    name: str
    description: Optional[str] = None
    button_image_url: Optional[str] = None
    intervals: List[MenuInterval] = Field(default_factory=list)
    item_categories: List[ItemCategory] = Field(default_factory=list)
    combo_categories: List[ComboCategory] = Field(default_factory=list)


for _model in (ItemModifierGroup, ItemSize, MenuItem, ItemCategory, GetMenuByIdResponse):
    _model.model_rebuild()
