"""
Format rules.

Contains rules that check well-known text formats:
- email, url: Contact and web addresses
- ip, ip_v4, ip_v6, mac_address: Network addresses
- uuid: Canonical UUID strings
- date: Parsable dates, optionally in a given format
"""

import ipaddress
import re
import uuid
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlparse

from dateutil import parser as date_parser

from fieldrules.core.base import CheckResult, FieldValue, ValueKind
from fieldrules.core.registry import register_rule

EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
MAC_ADDRESS_PATTERN = re.compile(r'([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}')
URL_SCHEMES = {"http", "https", "ftp", "ftps"}

# Shorthand date layouts accepted as the date rule parameter
DATE_LAYOUTS = {
    "yyyy-mm-dd": "%Y-%m-%d",
    "dd-mm-yyyy": "%d-%m-%Y",
    "mm/dd/yyyy": "%m/%d/%Y",
    "dd/mm/yyyy": "%d/%m/%Y",
}


def _string(value: FieldValue) -> Optional[str]:
    return value.raw if value.kind == ValueKind.STRING else None


@register_rule("email")
def check_email(value: FieldValue, params: List[str]) -> CheckResult:
    text = _string(value)
    if text is None or not EMAIL_PATTERN.fullmatch(text):
        return CheckResult.fail("The {field} field must be a valid email address")
    return CheckResult.ok()


@register_rule("url")
def check_url(value: FieldValue, params: List[str]) -> CheckResult:
    text = _string(value)
    if text is None or any(c.isspace() for c in text):
        return CheckResult.fail("The {field} field format is invalid")
    try:
        parsed = urlparse(text)
    except ValueError:
        return CheckResult.fail("The {field} field format is invalid")
    if parsed.scheme.lower() not in URL_SCHEMES or not parsed.netloc:
        return CheckResult.fail("The {field} field format is invalid")
    return CheckResult.ok()


def _ip_version(value: FieldValue) -> Optional[int]:
    text = _string(value)
    if text is None:
        return None
    try:
        return ipaddress.ip_address(text).version
    except ValueError:
        return None


@register_rule("ip")
def check_ip(value: FieldValue, params: List[str]) -> CheckResult:
    if _ip_version(value) is None:
        return CheckResult.fail("The {field} field must be a valid IP address")
    return CheckResult.ok()


@register_rule("ip_v4")
def check_ip_v4(value: FieldValue, params: List[str]) -> CheckResult:
    if _ip_version(value) != 4:
        return CheckResult.fail("The {field} field must be a valid IPv4 address")
    return CheckResult.ok()


@register_rule("ip_v6")
def check_ip_v6(value: FieldValue, params: List[str]) -> CheckResult:
    if _ip_version(value) != 6:
        return CheckResult.fail("The {field} field must be a valid IPv6 address")
    return CheckResult.ok()


@register_rule("mac_address")
def check_mac_address(value: FieldValue, params: List[str]) -> CheckResult:
    text = _string(value)
    if text is None or not MAC_ADDRESS_PATTERN.fullmatch(text):
        return CheckResult.fail("The {field} field must be a valid MAC address")
    return CheckResult.ok()


@register_rule("uuid")
def check_uuid(value: FieldValue, params: List[str]) -> CheckResult:
    text = _string(value)
    try:
        # Only the canonical hyphenated form is accepted
        valid = text is not None and str(uuid.UUID(text)) == text.lower()
    except ValueError:
        valid = False
    if not valid:
        return CheckResult.fail("The {field} field must contain valid UUID")
    return CheckResult.ok()


@register_rule("date")
def check_date(value: FieldValue, params: List[str]) -> CheckResult:
    """
    Without params any date python-dateutil understands passes.
    ``date:yyyy-mm-dd`` or ``date:%d.%m.%Y`` require that exact layout.
    """
    text = _string(value)
    if text is None or not text.strip():
        return CheckResult.fail("The {field} field must be a valid date")

    if params:
        layout = ",".join(params)
        fmt = DATE_LAYOUTS.get(layout.lower(), layout)
        try:
            datetime.strptime(text, fmt)
        except ValueError:
            return CheckResult.fail(f"The {{field}} field must be a valid date in {layout} format")
        return CheckResult.ok()

    try:
        date_parser.parse(text)
    except (ValueError, OverflowError):
        return CheckResult.fail("The {field} field must be a valid date")
    return CheckResult.ok()
