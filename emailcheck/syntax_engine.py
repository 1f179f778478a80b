# emailcheck/syntax_engine.py
import logging
import string
from typing import Optional, Tuple

from .config import settings

LOG = logging.getLogger(__name__)

# RFC 5321/5322 limits
MIN_EMAIL_LENGTH = 6
MAX_EMAIL_LENGTH = 254
MAX_LOCAL_LENGTH = 64
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63
MIN_TOP_LEVEL_LENGTH = 2
MIN_LABELS = 2
MAX_LABELS = 10

# atext plus period
LOCAL_SPECIALS = "!#$%&'*+-/=?^_`{|}~."

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
_LOCAL_CHARS = _ASCII_ALNUM | frozenset(LOCAL_SPECIALS)
_LABEL_CHARS = _ASCII_ALNUM | frozenset("-")


def _reject(rule: str, value: str) -> bool:
    if settings.LOG_REJECTIONS:
        LOG.debug("rejected %r: %s", value, rule)
    return False


def _has_clean_edges(value: str, edge_chars: str) -> bool:
    # same as comparing value with value stripped of whitespace and edge_chars
    first, last = value[0], value[-1]
    return not (
        first.isspace() or first in edge_chars
        or last.isspace() or last in edge_chars
    )


def _is_valid_local(local: str) -> bool:
    if not local:
        return _reject("empty local part", local)
    if len(local) > MAX_LOCAL_LENGTH:
        return _reject("local part too long", local)
    if local.startswith(".") or local.endswith("."):
        return _reject("local part starts or ends with a period", local)
    if ".." in local:
        return _reject("consecutive periods in local part", local)
    for ch in local:
        if ch not in _LOCAL_CHARS:
            return _reject("invalid character in local part", local)
    return True


def _is_valid_label(label: str, is_top_level: bool) -> bool:
    if not label:
        return _reject("empty label", label)
    if len(label) > MAX_LABEL_LENGTH:
        return _reject("label too long", label)
    if not _has_clean_edges(label, "-"):
        return _reject("label starts or ends with a hyphen", label)

    if is_top_level:
        if len(label) < MIN_TOP_LEVEL_LENGTH:
            return _reject("top-level label too short", label)
        if not all(ch in _ASCII_LETTERS for ch in label):
            return _reject("top-level label is not letters only", label)
        return True

    if not all(ch in _LABEL_CHARS for ch in label):
        return _reject("invalid character in label", label)
    return True


def _is_valid_domain(domain: str) -> bool:
    if not domain:
        return _reject("empty domain", domain)
    if len(domain) > MAX_DOMAIN_LENGTH:
        return _reject("domain too long", domain)
    if ".." in domain:
        return _reject("consecutive periods in domain", domain)
    if not _has_clean_edges(domain, "."):
        return _reject("domain starts or ends with a period", domain)

    labels = domain.split(".")
    if len(labels) < MIN_LABELS:
        return _reject("too few labels", domain)
    if len(labels) > MAX_LABELS:
        return _reject("too many labels", domain)

    last = len(labels) - 1
    return all(_is_valid_label(label, i == last) for i, label in enumerate(labels))


def split_email(addr: str) -> Optional[Tuple[str, str]]:
    """
    Validate addr and split it at the separator.

    Returns (local, domain) with the domain in its original case, or None
    when addr is not a valid address. Surrounding whitespace is ignored.
    """
    if not isinstance(addr, str):
        return None

    trimmed = addr.strip()

    if len(trimmed) < MIN_EMAIL_LENGTH:
        _reject("too short", trimmed)
        return None
    if len(trimmed) > MAX_EMAIL_LENGTH:
        _reject("too long", trimmed)
        return None

    at = trimmed.find("@")
    if at <= 0:
        _reject("no local part before @", trimmed)
        return None
    if trimmed.rfind("@") != at:
        _reject("more than one @", trimmed)
        return None

    local, domain = trimmed[:at], trimmed[at + 1:]
    if not (_is_valid_local(local) and _is_valid_domain(domain)):
        return None
    return local, domain


def is_syntax_valid(addr: str) -> bool:
    return split_email(addr) is not None


is_email = is_syntax_valid


def extract_local_part(addr: str) -> Optional[str]:
    parts = split_email(addr)
    if parts is None:
        return None
    return parts[0]


def extract_domain(addr: str) -> Optional[str]:
    parts = split_email(addr)
    if parts is None:
        return None
    return parts[1].lower()


def normalize_email(addr: str) -> Optional[str]:
    """
    Canonical form of a valid address: local part untouched, domain lowercased.

    Returns None for anything that does not validate.
    """
    local = extract_local_part(addr)
    domain = extract_domain(addr)
    if local is None or domain is None:
        return None
    return f"{local}@{domain}"
