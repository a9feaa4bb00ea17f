"""
Identity provider fault model.

Rackspace Identity reports failures as a single-key object whose key names the
fault, for example ``{"unauthorized": {"code": 401, "message": "..."}}``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class IdentityFault(BaseModel):
    """Structured fault returned by the identity provider."""

    name: str = Field(..., description="Fault name (unauthorized, badRequest, ...)")
    code: int = Field(..., description="HTTP status code reported in the fault body")
    message: Optional[str] = Field(default=None, description="Human-readable fault message")
    requestId: Optional[str] = Field(
        default=None, alias="request_id", description="Identity request ID for support"
    )

    model_config = {"populate_by_name": True}
