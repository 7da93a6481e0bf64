from .common import ApiErrorResponse, AuthResponse, IikoModel, IikoRequest  # noqa: F401
from .organizations import GetOrganizationsRequest, GetOrganizationsResponse, Organization  # noqa: F401
from .menu import (  # noqa: F401
    ComboCategory,
    CustomerTagGroup,
    ExternalMenu,
    GetMenuByIdRequest,
    GetMenuByIdResponse,
    GetMenuRequest,
    GetMenuResponse,
    ItemCategory,
    ItemModifierGroup,
    ItemPrice,
    ItemSize,
    MenuInterval,
    MenuItem,
    Nutrition,
    PriceCategory,
    ProductCategory,
    Schedule,
)
