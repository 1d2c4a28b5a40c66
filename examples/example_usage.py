"""Example: use the service layer directly (without Flask) and the API client.

Controllers are a thin layer; capacity arithmetic lives in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.resourceflow.resourceflow.client.api import ApiClient
from src.resourceflow.resourceflow.container import build_container
from src.resourceflow.resourceflow.database.bootstrap import apply_schema, ensure_default_settings


def services_example():
    settings = importlib.import_module(get_settings_module())
    container = build_container(database_url=settings.DATABASE_URL)
    apply_schema(container.conn)
    ensure_default_settings(container.conn)

    for row in container.utilization_service.team_month(month=date.today().replace(day=1)):
        print(row.member_name, f"{row.allocated_hours:.1f}h / {row.capacity.available_hours:.1f}h")


def client_example():
    settings = importlib.import_module(get_settings_module())
    client = ApiClient(settings.API_BASE_URL)
    print(client.test_connection())
    if client.health_check():
        print(client.utilization.dashboard()["team_utilization_percent"])


if __name__ == "__main__":
    services_example()
    client_example()
