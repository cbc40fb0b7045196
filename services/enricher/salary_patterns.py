"""Salary patterns for vacancy parsing.

Each pattern matches a salary mention together with its currency. The whole
matched substring is what gets stored, so the currency and the surrounding
"from"/"to" wording are kept as written in the message.
"""

import re

# Amount like "150000", "150 000" or "150 000 000"
_AMOUNT = r"\d+(?:\s\d+)*(?:\s?000)?"
_CURRENCY = r"(?:руб|₽|rub|доллар|\$|евро|€)"

# Note: Order matters! The first pattern that matches wins.
SALARY_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "Зарплата: 100 000 руб", "з/п от 80 000 ₽", "Salary: 3000$"
    re.compile(rf"(?:з/п|зарплата|salary).*?({_AMOUNT}.*?{_CURRENCY})", re.IGNORECASE),
    # "от 100 000 руб"
    re.compile(rf"от\s+({_AMOUNT}.*?{_CURRENCY})", re.IGNORECASE),
    # "до 150 000 руб"
    re.compile(rf"до\s+({_AMOUNT}.*?{_CURRENCY})", re.IGNORECASE),
    # "from 2000 $"
    re.compile(rf"\bfrom\s+({_AMOUNT}.*?{_CURRENCY})", re.IGNORECASE),
    # "up to 3000 €"
    re.compile(rf"\bup\s+to\s+({_AMOUNT}.*?{_CURRENCY})", re.IGNORECASE),
    # "100 000 - 150 000 руб"
    re.compile(rf"({_AMOUNT})\s*-\s*({_AMOUNT})\s*(?:руб|₽|rub)", re.IGNORECASE),
)
