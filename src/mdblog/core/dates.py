"""Post date parsing and display formatting"""

import re
from datetime import date, datetime


YMD_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
DMY_HYPHEN_RE = re.compile(r'^(\d{2})-(\d{2})-(\d{4})$')
DMY_SLASH_RE = re.compile(r'^(\d{2})/(\d{2})/(\d{4})$')

MONTHS = {
    'pt': ['janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
           'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro'],
    'en': ['January', 'February', 'March', 'April', 'May', 'June',
           'July', 'August', 'September', 'October', 'November', 'December'],
}


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date_string(s: str | None) -> date | None:
    """Parse YYYY-MM-DD, DD-MM-YYYY or DD/MM/YYYY, falling back to ISO datetime; None if unparseable."""
    if not s:
        return None
    if m := YMD_RE.match(s):
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    if m := DMY_HYPHEN_RE.match(s) or DMY_SLASH_RE.match(s):
        return _safe_date(int(m.group(3)), int(m.group(2)), int(m.group(1)))
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return None


def format_date_dmy(iso: str | None) -> str:
    """'2026-01-15' -> '15-01-2026'. Anything else is returned unchanged."""
    if not iso:
        return ''
    m = YMD_RE.match(iso)
    if not m:
        return iso
    return f'{m.group(3)}-{m.group(2)}-{m.group(1)}'


def format_date_long(s: str | None, locale: str = 'pt') -> str:
    """Long-form date: '15 de janeiro de 2026' (pt) or 'January 15, 2026' (en)."""
    d = parse_date_string(s)
    if d is None:
        return s or ''
    month = MONTHS[locale][d.month - 1]
    if locale == 'en':
        return f'{month} {d.day}, {d.year}'
    return f'{d.day} de {month} de {d.year}'
