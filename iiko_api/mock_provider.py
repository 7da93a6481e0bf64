from __future__ import annotations
import random
import uuid
from typing import List, Dict, Any, Optional

_RANDOM = random.Random()


def seed_mock(seed: Optional[int] = None) -> None:
    if seed is not None:
        _RANDOM.seed(seed)


def _uuid() -> str:
    return str(uuid.UUID(int=_RANDOM.getrandbits(128), version=4))


RESTAURANTS = ["Trattoria", "Pelmennaya", "Burger Lab", "Sushi Bar", "Coffee Point", "Pizzeria"]
CITIES = ["Moscow", "Kazan", "Almaty", "Tbilisi", "Minsk"]
DISHES = ["Спагетти Карбонара", "Борщ", "Pizza Margherita", "Caesar Salad", "Cheesecake", "Пельмени"]
CATEGORIES = ["Основные блюда", "Супы", "Салаты", "Десерты", "Напитки"]


def generate_mock_organizations(n: int = 3, additional_info: bool = False) -> Dict[str, Any]:
    organizations: List[Dict[str, Any]] = []
    for i in range(n):
        org: Dict[str, Any] = {
            'id': _uuid(),
            'name': f"{_RANDOM.choice(RESTAURANTS)} {i+1}",
        }
        if additional_info:
            org.update({
                'code': f"{i+1:03d}",
                'responseType': 'Extended',
                'country': 'Russia',
                'restaurantAddress': f"{_RANDOM.choice(CITIES)}, Main st. {_RANDOM.randint(1, 120)}",
                'latitude': round(_RANDOM.uniform(40.0, 60.0), 6),
                'longitude': round(_RANDOM.uniform(30.0, 60.0), 6),
                'currencyIsoName': 'RUB',
                'version': '8.9.1',
            })
        organizations.append(org)
    return {'correlationId': _uuid(), 'organizations': organizations}


def generate_mock_menus(n: int = 2, price_categories: int = 0) -> Dict[str, Any]:
    return {
        'correlationId': _uuid(),
        'externalMenus': [{'id': str(67964 + i), 'name': f"Menu {i+1}"} for i in range(n)],
        'priceCategories': [{'id': _uuid(), 'name': f"Price category {i+1}"} for i in range(price_categories)],
    }


def _nutrition() -> Dict[str, Any]:
    return {
        'fats': 0.0,
        'proteins': 0.0,
        'carbs': 0.0,
        'energy': 0.0,
        'organizations': [],
        'saturatedFattyAcid': None,
        'salt': None,
        'sugar': None,
    }


def _menu_item(sku: str, organization_ids: List[str]) -> Dict[str, Any]:
    price = float(_RANDOM.randrange(150, 3000, 50))
    return {
        'sku': sku,
        'name': _RANDOM.choice(DISHES),
        'description': '',
        'allergens': [],
        'tags': [],
        'labels': [],
        'itemSizes': [{
            'sku': sku,
            'sizeCode': None,
            'sizeName': '',
            'isDefault': True,
            'portionWeightGrams': float(_RANDOM.choice([250, 300, 500, 1000])),
            'itemModifierGroups': [],
            'sizeId': None,
            'nutritionPerHundredGrams': _nutrition(),
            'prices': [{'organizationId': org_id, 'price': price} for org_id in organization_ids],
            'nutritions': [],
            'isHidden': False,
            'measureUnitType': 'GRAM',
            'buttonImageUrl': None,
        }],
        'itemId': _uuid(),
        'modifierSchemaId': None,
        'taxCategory': None,
        'modifierSchemaName': '',
        'type': 'DISH',
        'canBeDivided': False,
        'canSetOpenPrice': False,
        'useBalanceForSell': False,
        'measureUnit': '',
        'productCategoryId': None,
        'customerTagGroups': [],
        'paymentSubject': None,
        'paymentSubjectCode': None,
        'outerEanCode': None,
        'isMarked': False,
        'isHidden': False,
        'barcodes': [],
        'orderItemType': 'Product',
    }


def generate_mock_menu_by_id(external_menu_id: str, organization_ids: List[str], categories: int = 2, items_per_category: int = 3) -> Dict[str, Any]:
    item_categories = []
    sku = 0
    for c in range(categories):
        items = []
        for _ in range(items_per_category):
            sku += 1
            items.append(_menu_item(f"{sku:05d}", organization_ids))
        item_categories.append({
            'id': _uuid(),
            'name': CATEGORIES[c % len(CATEGORIES)],
            'description': '',
            'buttonImageUrl': None,
            'headerImageUrl': None,
            'iikoGroupId': _uuid(),
            'items': items,
            'scheduleId': None,
            'scheduleName': None,
            'schedules': [],
            'isHidden': False,
            'tags': [],
            'labels': [],
        })
    return {
        'productCategories': [],
        'customerTagGroups': [],
        'revision': _RANDOM.randint(1_700_000_000, 1_800_000_000),
        'formatVersion': 2,
        'id': int(external_menu_id) if external_menu_id.isdigit() else _RANDOM.randint(1, 99999),
        'name': f"Menu {external_menu_id}",
        'description': '',
        'buttonImageUrl': None,
        'intervals': [],
        'itemCategories': item_categories,
        'comboCategories': [],
    }
