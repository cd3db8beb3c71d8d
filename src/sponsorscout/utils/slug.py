"""Company identifier utilities."""

import re

from slugify import slugify

COMPANY_ID_MAX_LENGTH = 50

NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]+")


def create_company_id(name: str) -> str:
    """
    Derive a stable company identifier from an employer name.

    Args:
        name: Raw employer name as it appears in the filing dataset

    Returns:
        Upper-case identifier with non-alphanumeric runs collapsed to ``_``

    Examples:
        >>> create_company_id("Acme Corp, Inc.")
        'ACME_CORP_INC'
        >>> create_company_id("  at&t services ")
        'AT_T_SERVICES'
        >>> create_company_id("Nestlé USA")
        'NESTL_USA'
    """
    # Non-ASCII letters are dropped, not transliterated
    collapsed = NON_ALPHANUMERIC.sub("_", name.strip().upper())
    return slugify(
        collapsed,
        separator="_",
        lowercase=False,
        regex_pattern=r"[^A-Z0-9]+",
        max_length=COMPANY_ID_MAX_LENGTH,
    )
