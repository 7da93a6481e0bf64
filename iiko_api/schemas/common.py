from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IikoModel(BaseModel):
    """Response record. Wire names are camelCase; unknown fields are kept."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='allow')

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict with wire names, omitting fields the server never sent."""
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class IikoRequest(BaseModel):
    """Request body. Only explicitly set fields are sent."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='forbid', frozen=True)

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class AuthResponse(IikoModel):
    token: str
    correlation_id: Optional[str] = None


class ApiErrorResponse(IikoModel):
    error_code: Optional[str] = None
    message: Optional[str] = None
    details: Any = None
