from __future__ import annotations
from enum import IntEnum


class EncryptionType(IntEnum):
    """Registered Kerberos encryption type numbers."""

    DES_CBC_CRC = 1
    DES_CBC_MD5 = 3
    DES3_CBC_SHA1_KD = 16
    AES128_CTS_HMAC_SHA1_96 = 17
    AES256_CTS_HMAC_SHA1_96 = 18
    AES128_CTS_HMAC_SHA256_128 = 19
    AES256_CTS_HMAC_SHA384_192 = 20
    RC4_HMAC = 23
    RC4_HMAC_EXP = 24

    @property
    def label(self) -> str:
        """Name as written in krb5.conf, e.g. ``aes256-cts-hmac-sha1-96``."""
        return self.name.lower().replace("_", "-")


def parse_etype(value: str) -> int:
    """Accept a decimal number or a registered name; numbers are not checked."""
    v = value.strip()
    try:
        return int(v, 10)
    except ValueError:
        pass
    key = v.lower().replace("_", "-")
    for et in EncryptionType:
        if et.label == key:
            return int(et)
    raise ValueError(f"unknown encryption type {value!r}")


def etype_name(value: int) -> str:
    try:
        return EncryptionType(value).label
    except ValueError:
        return str(value)
