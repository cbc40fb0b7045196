"""
Root pytest configuration.

Puts the services directory on the Python path so the bare package imports
used inside services ("from shared import Database", "from vacancies import
VacancyService") resolve the same way they do in the backend and in Airflow.
"""

import sys
from pathlib import Path

services_path = Path(__file__).parent.parent / "services"
if str(services_path) not in sys.path:
    sys.path.insert(0, str(services_path))
