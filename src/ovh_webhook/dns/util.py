"""DNS name helpers."""

from __future__ import annotations


def un_fqdn(name: str) -> str:
    """Strip the trailing root-zone dot from a name, if present."""
    return name.removesuffix(".")


def get_sub_domain(zone: str, fqdn: str) -> str:
    """Return the part of ``fqdn`` that precedes ``zone``.

    The zone may carry a trailing dot. When ``fqdn`` does not contain
    ``"." + zone`` there is no common suffix to cut, and the un-rooted fqdn
    is returned as-is.

    Args:
        zone: DNS zone name (e.g. "example.com.").
        fqdn: Record name (e.g. "_acme-challenge.sub.example.com.").

    Returns:
        Relative record name (e.g. "_acme-challenge.sub").
    """
    idx = fqdn.find("." + un_fqdn(zone))
    if idx != -1:
        return fqdn[:idx]
    return un_fqdn(fqdn)
