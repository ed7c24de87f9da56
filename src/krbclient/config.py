from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError
from .errors import SerializationError


class SettingsJSON(BaseModel):
    """Restricted JSON view of Settings: only the two pre-authentication flags."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    disable_pafx_fast: bool = Field(False, alias="DisablePAFXFast")
    assume_preauthentication: bool = Field(False, alias="AssumePreAuthentication")


@dataclass
class SettingsDraft:
    """Mutable scratch copy that options write into before it is frozen."""

    disable_pafx_fast: bool = False
    assume_preauthentication: bool = False
    pre_auth_etype: int = 0
    socks_addr: str = ""
    logger: Optional[logging.Logger] = None

    def freeze(self) -> "Settings":
        return Settings(
            disable_pafx_fast=self.disable_pafx_fast,
            assume_preauthentication=self.assume_preauthentication,
            pre_auth_etype=self.pre_auth_etype,
            socks_addr=self.socks_addr,
            logger=self.logger,
        )


Option = Callable[[SettingsDraft], None]


@dataclass(frozen=True)
class Settings:
    """Immutable optional settings for a Kerberos client.

    Every field defaults to its zero value, which means the feature is
    disabled or not configured. Build instances with ``new_settings``.
    """

    disable_pafx_fast: bool = False
    assume_preauthentication: bool = False
    pre_auth_etype: int = 0
    socks_addr: str = ""
    logger: Optional[logging.Logger] = field(default=None, compare=False)

    @property
    def is_proxied(self) -> bool:
        return self.socks_addr != ""

    def projection(self) -> Dict[str, Any]:
        """Return the serialized view as a mapping keyed by the JSON names."""
        return self._json_model().model_dump(by_alias=True)

    def to_json(self) -> str:
        """Return the indented JSON representation of the settings.

        Only ``DisablePAFXFast`` and ``AssumePreAuthentication`` are emitted;
        the encryption type, proxy address and logger are left out.

        Raises:
            SerializationError: if the encoder fails
        """
        try:
            return self._json_model().model_dump_json(by_alias=True, indent=2)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise SerializationError("unable to encode settings as JSON", original_error=exc) from exc

    def _json_model(self) -> SettingsJSON:
        return SettingsJSON(
            disable_pafx_fast=self.disable_pafx_fast,
            assume_preauthentication=self.assume_preauthentication,
        )


def new_settings(*options: Option) -> Settings:
    """Apply ``options`` in order to fresh defaults and return the frozen result.

    s = new_settings(disable_pafx_fast(True), socks_addr("127.0.0.1:1080"))
    """
    draft = SettingsDraft()
    for apply in options:
        apply(draft)
    return draft.freeze()


def disable_pafx_fast(b: bool) -> Option:
    """Configure the client not to use PA_FX_FAST.

    s = new_settings(disable_pafx_fast(True))
    """
    def apply(d: SettingsDraft) -> None:
        d.disable_pafx_fast = b
    return apply


def assume_preauthentication(b: bool) -> Option:
    """Configure the client to assume pre-authentication is required.

    s = new_settings(assume_preauthentication(True))
    """
    def apply(d: SettingsDraft) -> None:
        d.assume_preauthentication = b
    return apply


def pre_auth_etype(e: int) -> Option:
    """Configure the encryption type requested during pre-authentication.

    s = new_settings(pre_auth_etype(18))
    """
    def apply(d: SettingsDraft) -> None:
        d.pre_auth_etype = e
    return apply


def socks_addr(a: str) -> Option:
    """Configure the client to route traffic through a SOCKS5 proxy.

    s = new_settings(socks_addr("127.0.0.1:1080"))
    """
    def apply(d: SettingsDraft) -> None:
        d.socks_addr = a
    return apply


def logger(l: Optional[logging.Logger]) -> Option:
    """Configure the client with a logger.

    s = new_settings(logger(logging.getLogger("krb")))
    """
    def apply(d: SettingsDraft) -> None:
        d.logger = l
    return apply
