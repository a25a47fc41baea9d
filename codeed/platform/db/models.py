# Every mapped model, imported for Base.metadata (create_all, alembic).
from codeed.features.accounts.models.account import Account  # noqa: F401
from codeed.features.articles.models.article import Article, ArticleTag  # noqa: F401
from codeed.features.auth.models.auth_attempt import AuthAttempt  # noqa: F401
from codeed.features.courses.models.course import Course, CourseTag  # noqa: F401
from codeed.features.files.models.stored_file import StoredFile  # noqa: F401
from codeed.features.users.models.user import User  # noqa: F401
