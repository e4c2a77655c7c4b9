from typing import Iterable, TypeVar

T = TypeVar("T")


#Dutch euro formatting, e.g. 1234.5 -> "€ 1.234,50"
def format_price(price: float) -> str:
    amount = f"{abs(price):,.2f}"
    amount = amount.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if price < 0 else ""
    return f"€ {sign}{amount}"


#Human readable duration: 45 -> "45 min", 60 -> "1h", 90 -> "1h 30min"
def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} min"

    hrs, mins = divmod(minutes, 60)
    return f"{hrs}h {mins}min" if mins > 0 else f"{hrs}h"


#Trim seconds from a backend time value ("09:30:00" -> "09:30")
def format_time(time: str) -> str:
    return time[:5]


def get_initials(name: str) -> str:
    return "".join(part[0] for part in name.split(" ") if part).upper()[:2]


#Keep the first record for each name, display only
def dedupe_by_name(items: Iterable[T]) -> list[T]:
    seen = set()
    unique = []

    for item in items:
        if item.name in seen:
            continue
        seen.add(item.name)
        unique.append(item)

    return unique
