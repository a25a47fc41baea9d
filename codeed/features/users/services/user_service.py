from codeed.features.users.models.user import User
from codeed.features.users.repositories.user import UserRepository
from codeed.features.users.schemas.user import UserCreate, UserFilter, UserUpdate
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create_user(self, data: UserCreate) -> User:
        logger.info(f"Creating user: telegram_username={data.telegram_username} username={data.username}")
        user = await self.repository.create(data)
        logger.info(f"User created: id={user.id}")
        return user

    async def get_user_by_id(self, user_id: str) -> User:
        logger.info(f"Fetching user by ID: {user_id}")
        return await self.repository.get_by_id(user_id)

    async def get_user_by_telegram_username(self, telegram_username: str) -> User:
        logger.info(f"Fetching user by Telegram username: {telegram_username}")
        return await self.repository.get_by_telegram_username(telegram_username)

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        logger.info(f"Updating user: id={user_id}")
        await self.repository.update_by_id(user_id, data.changes())
        return await self.repository.get_by_id(user_id)

    async def delete_user(self, user_id: str) -> None:
        logger.info(f"Deleting user: id={user_id}")
        await self.repository.delete_by_id(user_id)

    async def find_users(self, filters: UserFilter) -> list[User]:
        return await self.repository.find(filters)
