"""
Country and language reference data.

Countries are stored as upper-case two-letter codes. Input may be either a
code ("us") or an English name ("United States"); unknown values are kept
upper-cased so that lookups stay consistent.
"""

from typing import Optional


COUNTRY_CODE_TO_NAME = {
    'US': 'UNITED STATES',
    'AF': 'AFGHANISTAN',
    'AL': 'ALBANIA',
    'DZ': 'ALGERIA',
    'AR': 'ARGENTINA',
    'AU': 'AUSTRALIA',
    'AT': 'AUSTRIA',
    'BH': 'BAHRAIN',
    'BD': 'BANGLADESH',
    'BE': 'BELGIUM',
    'BR': 'BRAZIL',
    'CA': 'CANADA',
    'CN': 'CHINA',
    'CO': 'COLOMBIA',
    'EG': 'EGYPT',
    'FR': 'FRANCE',
    'DE': 'GERMANY',
    'GB': 'UNITED KINGDOM',
    'IN': 'INDIA',
    'ID': 'INDONESIA',
    'IR': 'IRAN',
    'IQ': 'IRAQ',
    'IE': 'IRELAND',
    'IT': 'ITALY',
    'JO': 'JORDAN',
    'JP': 'JAPAN',
    'KE': 'KENYA',
    'KW': 'KUWAIT',
    'LB': 'LEBANON',
    'MY': 'MALAYSIA',
    'MX': 'MEXICO',
    'MA': 'MOROCCO',
    'NL': 'NETHERLANDS',
    'NZ': 'NEW ZEALAND',
    'NG': 'NIGERIA',
    'OM': 'OMAN',
    'PK': 'PAKISTAN',
    'PH': 'PHILIPPINES',
    'QA': 'QATAR',
    'SA': 'SAUDI ARABIA',
    'SG': 'SINGAPORE',
    'ZA': 'SOUTH AFRICA',
    'KR': 'SOUTH KOREA',
    'ES': 'SPAIN',
    'SE': 'SWEDEN',
    'CH': 'SWITZERLAND',
    'TH': 'THAILAND',
    'TR': 'TURKEY',
    'AE': 'UNITED ARAB EMIRATES',
    'VN': 'VIETNAM',
}

COUNTRY_NAME_TO_CODE = {name: code for code, name in COUNTRY_CODE_TO_NAME.items()}

LANGUAGES = [
    {'code': 'ar', 'name': 'Arabic', 'native_name': 'العربية'},
    {'code': 'zh', 'name': 'Chinese', 'native_name': '中文'},
    {'code': 'en', 'name': 'English', 'native_name': 'English'},
    {'code': 'hi', 'name': 'Hindi', 'native_name': 'हिन्दी'},
    {'code': 'es', 'name': 'Spanish', 'native_name': 'Español'},
    {'code': 'fr', 'name': 'French', 'native_name': 'Français'},
    {'code': 'ru', 'name': 'Russian', 'native_name': 'Русский'},
    {'code': 'pt', 'name': 'Portuguese', 'native_name': 'Português'},
    {'code': 'de', 'name': 'German', 'native_name': 'Deutsch'},
    {'code': 'ja', 'name': 'Japanese', 'native_name': '日本語'},
    {'code': 'ko', 'name': 'Korean', 'native_name': '한국어'},
    {'code': 'it', 'name': 'Italian', 'native_name': 'Italiano'},
    {'code': 'tr', 'name': 'Turkish', 'native_name': 'Türkçe'},
    {'code': 'pl', 'name': 'Polish', 'native_name': 'Polski'},
    {'code': 'nl', 'name': 'Dutch', 'native_name': 'Nederlands'},
    {'code': 'sv', 'name': 'Swedish', 'native_name': 'Svenska'},
    {'code': 'da', 'name': 'Danish', 'native_name': 'Dansk'},
    {'code': 'no', 'name': 'Norwegian', 'native_name': 'Norsk'},
    {'code': 'fi', 'name': 'Finnish', 'native_name': 'Suomi'},
    {'code': 'el', 'name': 'Greek', 'native_name': 'Ελληνικά'},
    {'code': 'he', 'name': 'Hebrew', 'native_name': 'עברית'},
    {'code': 'th', 'name': 'Thai', 'native_name': 'ไทย'},
    {'code': 'vi', 'name': 'Vietnamese', 'native_name': 'Tiếng Việt'},
    {'code': 'id', 'name': 'Indonesian', 'native_name': 'Bahasa Indonesia'},
    {'code': 'ms', 'name': 'Malay', 'native_name': 'Bahasa Melayu'},
    {'code': 'tl', 'name': 'Filipino', 'native_name': 'Filipino'},
    {'code': 'sw', 'name': 'Swahili', 'native_name': 'Kiswahili'},
    {'code': 'bn', 'name': 'Bengali', 'native_name': 'বাংলা'},
    {'code': 'ur', 'name': 'Urdu', 'native_name': 'اردو'},
    {'code': 'fa', 'name': 'Persian', 'native_name': 'فارسی'},
    {'code': 'uk', 'name': 'Ukrainian', 'native_name': 'Українська'},
    {'code': 'cs', 'name': 'Czech', 'native_name': 'Čeština'},
    {'code': 'hu', 'name': 'Hungarian', 'native_name': 'Magyar'},
    {'code': 'ro', 'name': 'Romanian', 'native_name': 'Română'},
]


def normalize_country_to_code(country: Optional[str]) -> Optional[str]:
    """
    Normalize a country code or name to an upper-case code.

    >>> normalize_country_to_code('United States')
    'US'
    >>> normalize_country_to_code(' us ')
    'US'
    """
    if not country or not country.strip():
        return None

    value = country.strip().upper()
    if value in COUNTRY_CODE_TO_NAME:
        return value
    if value in COUNTRY_NAME_TO_CODE:
        return COUNTRY_NAME_TO_CODE[value]
    return value


def normalize_country_to_name(country: Optional[str]) -> Optional[str]:
    """Normalize a country code or name to an upper-case English name."""
    if not country or not country.strip():
        return None

    value = country.strip().upper()
    return COUNTRY_CODE_TO_NAME.get(value, value)


def list_countries() -> list[dict]:
    """Known countries sorted by name."""
    return [
        {'code': code, 'name': name.title()}
        for code, name in sorted(COUNTRY_CODE_TO_NAME.items(), key=lambda item: item[1])
    ]
