# scripts/list_users.py
"""
Load users from a running API and print them.

Usage:
    API_BASE_URL=http://localhost:8080 python -m scripts.list_users
"""

import asyncio

from app.config import configure_logging, get_settings
from client.component import UserListComponent
from client.service import UserService


async def run(base_url: str) -> str:
    component = UserListComponent(UserService(base_url))
    await component.on_init()
    return component.render()


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    print(asyncio.run(run(settings.API_BASE_URL)))


if __name__ == "__main__":
    main()
