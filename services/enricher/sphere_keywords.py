"""Sphere keyword tables for vacancy parsing.

HASHTAG_SPHERES maps a lowercased hashtag (without "#") to a sphere.
POSITION_SPHERES is the fallback used when no hashtag maps: the first keyword
found as a substring of the lowercased position wins, so insertion order
matters there.
"""

from types import MappingProxyType

COPYWRITING = "Копирайтинг"
DESIGN = "Дизайн"
MARKETING = "Маркетинг"
SMM = "SMM"
IT = "IT"
MANAGEMENT = "Менеджмент"
HR = "HR"
SALES = "Продажи"
FINANCE = "Финансы"
ADVERTISING = "Реклама и PR"
CREATIVE = "Креатив"
SUPPORT = "Клиентский сервис и поддержка"

HASHTAG_SPHERES = MappingProxyType(
    {
        "копирайтер": COPYWRITING,
        "копирайтинг": COPYWRITING,
        "редактор": COPYWRITING,
        "дизайн": DESIGN,
        "дизайнер": DESIGN,
        "маркетинг": MARKETING,
        "маркетолог": MARKETING,
        "смм": SMM,
        "it": IT,
        "программист": IT,
        "разработчик": IT,
        "менеджер": MANAGEMENT,
        "менеджмент": MANAGEMENT,
        "hr": HR,
        "продажи": SALES,
        "финансы": FINANCE,
        "реклама": ADVERTISING,
        "pr": ADVERTISING,
        "креатив": CREATIVE,
        "поддержка": SUPPORT,
        "сервис": SUPPORT,
        # English tags used by some channels
        "copywriter": COPYWRITING,
        "editor": COPYWRITING,
        "design": DESIGN,
        "designer": DESIGN,
        "marketing": MARKETING,
        "smm": SMM,
        "developer": IT,
        "manager": MANAGEMENT,
        "sales": SALES,
        "finance": FINANCE,
        "support": SUPPORT,
    }
)

POSITION_SPHERES = MappingProxyType(
    {
        "копирайтер": COPYWRITING,
        "редактор": COPYWRITING,
        "дизайнер": DESIGN,
        "маркетолог": MARKETING,
        "смм": SMM,
        "программист": IT,
        "разработчик": IT,
        "менеджер": MANAGEMENT,
        "hr": HR,
        "продажи": SALES,
        "финансы": FINANCE,
    }
)
