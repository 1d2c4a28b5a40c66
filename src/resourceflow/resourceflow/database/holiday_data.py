"""Canada (Quebec/Montreal) and Brazil (Sao Paulo/Campinas) holidays for 2026-2027."""

from __future__ import annotations

from typing import List, Tuple

# (name, date, country)
HolidayRow = Tuple[str, str, str]


def _fixed(name: str, month_day: str, country: str, years=(2026, 2027)) -> List[HolidayRow]:
    return [(name, f"{year}-{month_day}", country) for year in years]


CANADA_HOLIDAYS: List[HolidayRow] = [
    *_fixed("New Year's Day", "01-01", "Canada"),
    ("Good Friday", "2026-04-03", "Canada"),
    ("Good Friday", "2027-03-26", "Canada"),
    ("Easter Monday", "2026-04-06", "Canada"),
    ("Easter Monday", "2027-03-29", "Canada"),
    ("Victoria Day", "2026-05-18", "Canada"),
    ("Victoria Day", "2027-05-24", "Canada"),
    *_fixed("Montreal Foundation Day", "05-17", "Canada"),
    *_fixed("Saint-Jean-Baptiste Day", "06-24", "Canada"),
    *_fixed("Canada Day", "07-01", "Canada"),
    ("Labour Day", "2026-09-07", "Canada"),
    ("Labour Day", "2027-09-06", "Canada"),
    ("Thanksgiving", "2026-10-12", "Canada"),
    ("Thanksgiving", "2027-10-11", "Canada"),
    *_fixed("Remembrance Day", "11-11", "Canada"),
    *_fixed("Christmas Day", "12-25", "Canada"),
    *_fixed("Boxing Day", "12-26", "Canada"),
]

BRAZIL_HOLIDAYS: List[HolidayRow] = [
    *_fixed("New Year's Day", "01-01", "Brazil"),
    *_fixed("Sao Paulo Foundation Day", "01-25", "Brazil"),
    ("Carnival Monday", "2026-02-16", "Brazil"),
    ("Carnival Tuesday", "2026-02-17", "Brazil"),
    ("Carnival Monday", "2027-02-08", "Brazil"),
    ("Carnival Tuesday", "2027-02-09", "Brazil"),
    ("Good Friday", "2026-04-03", "Brazil"),
    ("Good Friday", "2027-03-26", "Brazil"),
    *_fixed("Tiradentes Day", "04-21", "Brazil"),
    *_fixed("Labour Day", "05-01", "Brazil"),
    ("Corpus Christi", "2026-06-04", "Brazil"),
    ("Corpus Christi", "2027-05-27", "Brazil"),
    *_fixed("Campinas Foundation Day", "07-14", "Brazil"),
    *_fixed("Independence Day", "09-07", "Brazil"),
    *_fixed("Our Lady of Aparecida", "10-12", "Brazil"),
    *_fixed("All Souls' Day", "11-02", "Brazil"),
    *_fixed("Republic Proclamation Day", "11-15", "Brazil"),
    *_fixed("Christmas Day", "12-25", "Brazil"),
]

ALL_HOLIDAYS: List[HolidayRow] = sorted(CANADA_HOLIDAYS + BRAZIL_HOLIDAYS, key=lambda h: (h[1], h[2]))
