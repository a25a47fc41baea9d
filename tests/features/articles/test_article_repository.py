import pytest

from codeed.features.articles.repositories.article import ArticleRepository
from codeed.features.articles.schemas.article import ArticleCreate, ArticleFilter, ArticleUpdate
from codeed.features.articles.services.article_service import ArticleService
from codeed.platform.exceptions import InvalidIdFormatError, NotFoundError

COURSE_ID = "01890a5d-ac96-774b-bcce-b302099a8057"


@pytest.fixture
def repository(db_session) -> ArticleRepository:
    return ArticleRepository(db_session)


async def create_article(repository, title="Variables", **fields):
    return await repository.create(
        ArticleCreate(course_id=COURSE_ID, title=title, content_md="# v1", tags=["python"], **fields)
    )


class TestCreateArticle:
    async def test_starts_as_first_draft(self, repository):
        article = await create_article(repository)

        assert article.version == 1
        assert article.is_draft is True
        assert list(article.tags) == ["python"]

    async def test_rejects_bad_course_id(self, repository):
        with pytest.raises(InvalidIdFormatError):
            await repository.create(ArticleCreate(course_id="nope", title="Variables"))


class TestCloneWithIncrementedVersion:
    async def test_clone_after_two_versions_is_version_three(self, repository, db_session):
        first = await create_article(repository)
        second = await repository.clone_with_incremented_version(first.id)
        assert second.version == 2

        third = await repository.clone_with_incremented_version(first.id)

        assert third.version == 3
        assert third.id not in (first.id, second.id)
        assert third.course_id == COURSE_ID
        assert third.title == "Variables"
        assert third.content_md == "# v1"
        assert list(third.tags) == ["python"]
        assert third.is_draft is True

        db_session.expire_all()
        originals = await repository.find_all_versions(COURSE_ID, "Variables")
        assert [a.version for a in originals] == [1, 2, 3]
        assert (await repository.get_by_id(first.id)).version == 1
        assert (await repository.get_by_id(second.id)).version == 2

    async def test_clone_resets_draft_flag_and_timestamps(self, repository):
        article = await create_article(repository)
        await repository.update_by_id(article.id, {"is_draft": False})

        clone = await repository.clone_with_incremented_version(article.id)

        assert clone.is_draft is True
        assert clone.created_at >= article.created_at

    async def test_deleted_siblings_do_not_count(self, repository):
        first = await create_article(repository)
        second = await repository.clone_with_incremented_version(first.id)
        await repository.delete_by_id(second.id)

        clone = await repository.clone_with_incremented_version(first.id)
        assert clone.version == 2

    async def test_deleted_article_cannot_be_cloned(self, repository):
        article = await create_article(repository)
        await repository.delete_by_id(article.id)

        with pytest.raises(NotFoundError):
            await repository.clone_with_incremented_version(article.id)


class TestFindArticles:
    async def test_filters(self, repository):
        await create_article(repository, title="Variables")
        loops = await create_article(repository, title="Loops")
        await repository.clone_with_incremented_version(loops.id)

        assert len(await repository.find(ArticleFilter(title="loop"))) == 2
        assert len(await repository.find(ArticleFilter(version=2))) == 1
        assert len(await repository.find(ArticleFilter(tags=["python", "go"]))) == 3
        assert await repository.find(ArticleFilter(tags=["go"])) == []
        assert len(await repository.find(ArticleFilter(course_id=COURSE_ID, is_draft=True))) == 3

    async def test_deleted_articles_are_excluded(self, repository):
        article = await create_article(repository)
        await repository.delete_by_id(article.id)

        assert await repository.find(ArticleFilter(course_id=COURSE_ID, tags=["python"])) == []
        assert await repository.find_all_versions(COURSE_ID, "Variables") == []


class TestUpdateWithVersioning:
    async def test_changes_land_on_the_clone(self, repository, db_session):
        service = ArticleService(repository)
        original = await create_article(repository)

        clone = await service.update_with_versioning(original.id, ArticleUpdate(content_md="# v2"))

        assert clone.version == 2
        assert clone.content_md == "# v2"
        db_session.expire_all()
        assert (await repository.get_by_id(original.id)).content_md == "# v1"
