"""Example: using the async data services directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import asyncio
import importlib

from salarybox.config import get_settings_module
from salarybox.container import build_container


async def main():
    settings = importlib.import_module(get_settings_module())
    services = build_container(latency=settings.SIMULATED_LATENCY, seed=settings.RANDOM_SEED).data_services

    session = await services.login("employee@salarybox.com", "employee123")
    summary = await services.get_attendance_summary(session.user_id, session=session)
    print(summary)
    for record in await services.get_payroll(session.user_id, session=session):
        print(record.month, record.status.value, record.net_salary)


if __name__ == "__main__":
    asyncio.run(main())
