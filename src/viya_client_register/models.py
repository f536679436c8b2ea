"""Data models for SAS Logon client registration."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"


class GrantType(str, Enum):
    """OAuth grant types a registered client may use."""

    AUTHORIZATION_CODE = "authorization_code"
    PASSWORD = "password"


class RegistrationParameters(BaseModel):
    """Caller-supplied parameters for one registration run.

    Empty strings and empty lists mean "not supplied"; ``None`` validity
    values mean "use the platform default".
    """

    client_id: str = ""
    client_secret: str = ""
    client_name: Optional[str] = None
    scopes: List[str] = Field(default_factory=list)
    grant_type: GrantType = GrantType.AUTHORIZATION_CODE
    authorized_grant_types: List[str] = Field(default_factory=list)
    required_user_groups: List[str] = Field(default_factory=list)
    autoapprove: Optional[Union[bool, List[str]]] = None
    use_session: Optional[bool] = None
    access_token_validity: Optional[int] = None
    refresh_token_validity: Optional[int] = None


class ClientRegistrationRequest(BaseModel):
    """Body of ``POST /SASLogon/oauth/clients``.

    Field order is the serialization order; ``redirect_uri`` stays last.
    Optional fields left at ``None`` are dropped from the JSON document.
    """

    model_config = ConfigDict(populate_by_name=True)

    client_id: str
    client_secret: str
    name: Optional[str] = None
    scopes: List[str] = Field(..., min_length=1, serialization_alias="scope")
    authorized_grant_types: List[str] = Field(..., min_length=1)
    required_user_groups: Optional[List[str]] = None
    autoapprove: Optional[Union[bool, List[str]]] = None
    use_session: Optional[bool] = None
    access_token_validity_seconds: Optional[int] = Field(
        None, serialization_alias="access_token_validity"
    )
    refresh_token_validity_seconds: Optional[int] = Field(
        None, serialization_alias="refresh_token_validity"
    )
    redirect_uri: str = OOB_REDIRECT_URI

    def to_json_bytes(self) -> bytes:
        """Serialize to the JSON document sent to SAS Logon."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class ClientRegistrationResult(BaseModel):
    """Outcome of a confirmed successful registration."""

    client_id: str
    client_secret: str
    grant_type: GrantType
    authorize_url: Optional[str] = None

    def record(self) -> dict:
        """The id/secret pair handed to the output target."""
        return {"client_id": self.client_id, "client_secret": self.client_secret}


class AccessTokenResponse(BaseModel):
    """Response of the Consul token exchange; only ``access_token`` is used."""

    access_token: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="allow")


class PlatformErrorResponse(BaseModel):
    """Error object returned by SAS Logon, e.g. ``{"error": "...", ...}``."""

    error: str
    error_description: Optional[str] = None

    model_config = ConfigDict(extra="allow")
