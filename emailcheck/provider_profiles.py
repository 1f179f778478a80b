# emailcheck/provider_profiles.py
from types import MappingProxyType
from typing import Optional

from .syntax_engine import extract_domain

COMMON_PROVIDERS = MappingProxyType({
    # Google
    "gmail.com": "Gmail",
    "googlemail.com": "Gmail",

    # Microsoft
    "outlook.com": "Outlook",
    "outlook.co.uk": "Outlook",
    "outlook.de": "Outlook",
    "outlook.fr": "Outlook",
    "outlook.it": "Outlook",
    "outlook.es": "Outlook",
    "outlook.com.au": "Outlook",
    "outlook.ca": "Outlook",
    "outlook.be": "Outlook",
    "outlook.com.ar": "Outlook",
    "outlook.com.br": "Outlook",
    "outlook.co.in": "Outlook",
    "outlook.co.jp": "Outlook",
    "hotmail.com": "Outlook",
    "hotmail.co.uk": "Outlook",
    "hotmail.de": "Outlook",
    "hotmail.fr": "Outlook",
    "hotmail.it": "Outlook",
    "hotmail.es": "Outlook",
    "hotmail.com.au": "Outlook",
    "hotmail.ca": "Outlook",
    "hotmail.com.br": "Outlook",
    "hotmail.co.jp": "Outlook",
    "live.com": "Outlook",
    "live.co.uk": "Outlook",
    "live.de": "Outlook",
    "live.fr": "Outlook",
    "live.it": "Outlook",
    "live.ca": "Outlook",
    "live.com.au": "Outlook",
    "msn.com": "Outlook",

    # Yahoo
    "yahoo.com": "Yahoo",
    "yahoo.co.uk": "Yahoo",
    "yahoo.ca": "Yahoo",
    "yahoo.de": "Yahoo",
    "yahoo.fr": "Yahoo",
    "yahoo.it": "Yahoo",
    "yahoo.es": "Yahoo",
    "yahoo.com.au": "Yahoo",
    "yahoo.co.jp": "Yahoo",
    "yahoo.com.br": "Yahoo",
    "yahoo.co.in": "Yahoo",
    "yahoo.com.mx": "Yahoo",

    # Apple
    "icloud.com": "iCloud",
    "me.com": "iCloud",
    "mac.com": "iCloud",

    # AOL
    "aol.com": "AOL",
    "aol.co.uk": "AOL",
    "aol.de": "AOL",
    "aol.fr": "AOL",

    # privacy-focused
    "protonmail.com": "ProtonMail",
    "proton.me": "ProtonMail",
    "tutanota.com": "Tutanota",
    "tutanota.de": "Tutanota",
    "hey.com": "Hey",

    # regional
    "yandex.com": "Yandex",
    "yandex.ru": "Yandex",
    "mail.ru": "Mail.Ru",
    "gmx.de": "GMX",
    "gmx.com": "GMX",
    "gmx.net": "GMX",
    "web.de": "Web.de",
    "orange.fr": "Orange",
    "wanadoo.fr": "Orange",
    "free.fr": "Free",
    "laposte.net": "La Poste",
    "naver.com": "Naver",
    "daum.net": "Daum",
    "163.com": "NetEase",
    "126.com": "NetEase",
    "qq.com": "QQ Mail",

    "zoho.com": "Zoho",
    "zoho.eu": "Zoho",
})


def provider_for_domain(domain: str) -> Optional[str]:
    # exact match only, no suffix/wildcard handling
    if not domain or not isinstance(domain, str):
        return None
    return COMMON_PROVIDERS.get(domain.lower())


def identify_provider(email: str) -> Optional[str]:
    """
    Human-readable provider name for a valid address, e.g. "Gmail".

    Invalid addresses and unlisted domains give None.
    """
    domain = extract_domain(email)
    if domain is None:
        return None
    return COMMON_PROVIDERS.get(domain)


def is_personal_provider(email: str) -> bool:
    return identify_provider(email) is not None
