from __future__ import annotations
from typing import List, Optional

from .common import IikoModel, IikoRequest


class GetOrganizationsRequest(IikoRequest):
    organization_ids: Optional[List[str]] = None
    return_additional_info: bool = False
    include_disabled: bool = False


class Organization(IikoModel):
    # additional fields (address, currency, ...) only arrive with returnAdditionalInfo
    id: str
    name: str
    code: Optional[str] = None
    response_type: Optional[str] = None
    country: Optional[str] = None
    restaurant_address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    currency_iso_name: Optional[str] = None
    version: Optional[str] = None


class GetOrganizationsResponse(IikoModel):
    correlation_id: str
    organizations: List[Organization]
