"""
Hourly Channel Parsing DAG

Runs the same ingestion pipeline as the manual POST /parse endpoint:
reads the latest messages of the source Telegram channels, extracts vacancy
fields and stores new vacancies. Results are only logged.

Schedule: Every hour at minute 0
"""

from datetime import datetime

from airflow import DAG
from airflow.operators.python import PythonOperator
from task_functions import parse_channels_task

# Failed runs are not retried; the next hourly run picks the messages up again
default_args = {
    "owner": "data_engineer",
    "depends_on_past": False,
    "email_on_failure": False,
    "email_on_retry": False,
    "retries": 0,
    "start_date": datetime(2025, 1, 1),
}

dag = DAG(
    "parse_channels_hourly",
    default_args=default_args,
    description="Hourly Telegram channel parsing into vacancies",
    schedule="0 * * * *",
    catchup=False,
    max_active_runs=1,
    tags=["telegram", "vacancies", "hourly"],
)

parse_channels = PythonOperator(
    task_id="parse_channels",
    python_callable=parse_channels_task,
    dag=dag,
)
