from codeed.features.users.models.user import User
from codeed.features.users.schemas.user import UserCreate, UserFilter
from codeed.platform.db.repository import SoftDeleteRepository
from codeed.platform.exceptions import AlreadyExistsError, NotFoundError
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class UserRepository(SoftDeleteRepository[User]):
    model = User
    entity = "user"

    async def create(self, data: UserCreate) -> User:
        result = await self.db.execute(
            self.active().where(User.telegram_username == data.telegram_username)
        )
        if result.scalars().first() is not None:
            logger.warning(f"User already exists: telegram_username={data.telegram_username}")
            raise AlreadyExistsError("User already exists")

        return await self.insert(User(**data.model_dump()))

    async def get_by_telegram_username(self, telegram_username: str) -> User:
        result = await self.db.execute(
            self.active().where(User.telegram_username == telegram_username)
        )
        user = result.scalars().first()
        if user is None:
            logger.warning(f"User not found by telegram_username: {telegram_username}")
            raise NotFoundError("User not found")
        return user

    async def find(self, filters: UserFilter) -> list[User]:
        criteria = []
        if filters.username:
            criteria.append(User.username.icontains(filters.username, autoescape=True))
        if filters.telegram_username:
            criteria.append(User.telegram_username == filters.telegram_username)
        if filters.role is not None:
            criteria.append(User.role == filters.role)
        return await self.find_where(*criteria, order_by=(User.created_at,))
