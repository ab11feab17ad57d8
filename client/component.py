# client/component.py

from typing import List

from client.models import User
from client.service import UserService


class UserListComponent:
    """Holds the list of users shown by the view; starts empty."""

    header = "Users"

    def __init__(self, user_service: UserService):
        self.user_service = user_service
        self.users: List[User] = []

    async def on_init(self) -> None:
        await self.get_users()

    async def get_users(self) -> None:
        # Errors propagate and leave the current list as it was
        self.users = await self.user_service.get_users()

    def render(self) -> str:
        lines = [self.header]
        for user in self.users:
            lines.append(
                f"{user.first_name} {user.last_name} <{user.email}> - {user.city}"
            )
        return "\n".join(lines)
