# emailcheck/batch.py
# Order-preserving sequence helpers over the single-address operations.
import logging
from typing import Iterable, List, Optional

from .syntax_engine import is_syntax_valid, normalize_email

LOG = logging.getLogger(__name__)


def filter_valid(emails: Iterable[str]) -> List[str]:
    emails = list(emails)
    valid = [e for e in emails if is_syntax_valid(e)]
    LOG.debug("filter_valid checked=%d valid=%d", len(emails), len(valid))
    return valid


def normalize_all(emails: Iterable[str]) -> List[str]:
    """Normalized form of every valid address; invalid ones are dropped."""
    emails = list(emails)
    normalized = []
    for e in emails:
        n = normalize_email(e)
        if n is not None:
            normalized.append(n)
    LOG.debug("normalize_all checked=%d valid=%d", len(emails), len(normalized))
    return normalized


def count_valid(emails: Iterable[str]) -> int:
    return sum(1 for e in emails if is_syntax_valid(e))


def any_valid(emails: Iterable[str]) -> bool:
    return any(is_syntax_valid(e) for e in emails)


def filter_valid_or_none(emails: Iterable[str]) -> Optional[List[str]]:
    valid = filter_valid(emails)
    return valid or None


def normalize_all_or_none(emails: Iterable[str]) -> Optional[List[str]]:
    normalized = normalize_all(emails)
    return normalized or None
