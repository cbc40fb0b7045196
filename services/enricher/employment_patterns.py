"""Employment type patterns for vacancy parsing.

This module contains the patterns used to detect the work format of a vacancy
(remote, office or hybrid) in Russian and English message texts.
"""

import re

REMOTE = "Remote"
OFFICE = "Office"
HYBRID = "Hybrid"

EMPLOYMENT_TYPES = (REMOTE, OFFICE, HYBRID)

# Note: Order matters! Patterns are checked top to bottom and the first one
# found anywhere in the text wins, regardless of where it occurs.
# Russian patterns come first since most source channels post in Russian.
EMPLOYMENT_TYPE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"удален[нао]", re.IGNORECASE), REMOTE),
    (re.compile(r"офис", re.IGNORECASE), OFFICE),
    (re.compile(r"гибрид", re.IGNORECASE), HYBRID),
    (re.compile(r"remote", re.IGNORECASE), REMOTE),
    (re.compile(r"office", re.IGNORECASE), OFFICE),
    (re.compile(r"hybrid", re.IGNORECASE), HYBRID),
)
