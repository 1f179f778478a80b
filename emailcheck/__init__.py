# emailcheck/__init__.py

from .syntax_engine import (
    is_syntax_valid,
    is_email,
    split_email,
    extract_local_part,
    extract_domain,
    normalize_email,
)

from .provider_profiles import (
    COMMON_PROVIDERS,
    provider_for_domain,
    identify_provider,
    is_personal_provider,
)

from .batch import (
    filter_valid,
    normalize_all,
    count_valid,
    any_valid,
    filter_valid_or_none,
    normalize_all_or_none,
)

from .config import settings, configure_logging

__all__ = [
    "is_syntax_valid",
    "is_email",
    "split_email",
    "extract_local_part",
    "extract_domain",
    "normalize_email",
    "COMMON_PROVIDERS",
    "provider_for_domain",
    "identify_provider",
    "is_personal_provider",
    "filter_valid",
    "normalize_all",
    "count_valid",
    "any_valid",
    "filter_valid_or_none",
    "normalize_all_or_none",
    "settings",
    "configure_logging",
]
