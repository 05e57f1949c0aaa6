"""Unit tests for BlogService."""

from datetime import date
from uuid import uuid4

import pytest

from autohub.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from autohub.domain.model import BlogPostDetails
from autohub.domain.repository import BlogPostRepository
from autohub.domain.service import BlogService
from autohub.domain.value import UserRole
from tests.conftest import make_blog_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


def _details(title: str = "Winter Tyres: A Guide", **kwargs) -> BlogPostDetails:
    return BlogPostDetails(title=title, content="Fit them before November.", **kwargs)


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_slug_is_derived_from_title(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR, name="Writer")

        # Act
        post = await service.create_post(author.as_caller(), _details())

        # Assert
        assert post.slug == "winter-tyres-a-guide"
        assert post.author_name == "Writer"
        assert post.views == 0
        assert post.published_on is not None

    @pytest.mark.asyncio
    async def test_chosen_slug_and_date_are_kept(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR)

        # Act
        post = await service.create_post(
            author.as_caller(),
            _details(slug="tyres-2026", published_on=date(2026, 2, 1)),
        )

        # Assert
        assert post.slug == "tyres-2026"
        assert post.published_on == date(2026, 2, 1)

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR).as_caller()
        await service.create_post(author, _details())

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="winter-tyres-a-guide"):
            await service.create_post(author, _details())

    @pytest.mark.asyncio
    async def test_title_without_letters_cannot_form_slug(self, unit_env):
        service = await unit_env.get(BlogService)

        with pytest.raises(ValidationError):
            await service.create_post(
                make_user(role=UserRole.AUTHOR).as_caller(), _details(title="!!!")
            )

    @pytest.mark.asyncio
    async def test_plain_user_cannot_publish(self, unit_env):
        service = await unit_env.get(BlogService)

        with pytest.raises(PermissionDeniedError):
            await service.create_post(make_user().as_caller(), _details())


class TestReadPost:
    @pytest.mark.asyncio
    async def test_each_read_counts_one_view(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        repo = await unit_env.get(BlogPostRepository)
        post = make_blog_post(make_user(), slug="oil-change")
        await repo.save(post)

        # Act
        await service.read_post("oil-change")
        second = await service.read_post("oil-change")

        # Assert
        assert second.views == 2

    @pytest.mark.asyncio
    async def test_failed_view_count_still_returns_post(self, unit_env, monkeypatch):
        # Arrange
        service = await unit_env.get(BlogService)
        repo = await unit_env.get(BlogPostRepository)
        post = make_blog_post(make_user(), slug="oil-change")
        await repo.save(post)

        async def broken(post_id):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(repo, "increment_views", broken)

        # Act
        read = await service.read_post("oil-change")

        # Assert
        assert read.id == post.id
        assert read.views == 0

    @pytest.mark.asyncio
    async def test_unknown_slug_raises_not_found(self, unit_env):
        service = await unit_env.get(BlogService)

        with pytest.raises(NotFoundError):
            await service.read_post("no-such-post")


class TestUpdatePost:
    @pytest.mark.asyncio
    async def test_title_edit_keeps_slug(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR)
        post = await service.create_post(author.as_caller(), _details())

        # Act
        updated = await service.update_post(
            author.as_caller(), post.id, {"title": "Summer Tyres"}
        )

        # Assert
        assert updated.title == "Summer Tyres"
        assert updated.slug == "winter-tyres-a-guide"

    @pytest.mark.asyncio
    async def test_null_slug_is_regenerated_from_new_title(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR)
        post = await service.create_post(author.as_caller(), _details())

        # Act
        updated = await service.update_post(
            author.as_caller(), post.id, {"title": "Summer Tyres", "slug": None}
        )

        # Assert
        assert updated.slug == "summer-tyres"

    @pytest.mark.asyncio
    async def test_slug_taken_by_another_post_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR).as_caller()
        await service.create_post(author, _details(slug="taken"))
        post = await service.create_post(author, _details(slug="mine"))

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await service.update_post(author, post.id, {"slug": "taken"})

    @pytest.mark.asyncio
    async def test_other_author_cannot_edit_but_moderator_can(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        post = await service.create_post(
            make_user(role=UserRole.AUTHOR).as_caller(), _details()
        )
        other = make_user(role=UserRole.AUTHOR).as_caller()
        moderator = make_user(role=UserRole.MODERATOR).as_caller()

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.update_post(other, post.id, {"excerpt": "Hijacked"})
        updated = await service.update_post(moderator, post.id, {"excerpt": "Tidied"})
        assert updated.excerpt == "Tidied"

    @pytest.mark.asyncio
    async def test_views_are_not_editable(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR).as_caller()
        post = await service.create_post(author, _details())

        # Act & Assert
        with pytest.raises(ValidationError, match="views"):
            await service.update_post(author, post.id, {"views": 1000})


class TestDiscovery:
    @pytest.mark.asyncio
    async def test_related_posts_rank_author_over_category_over_tags(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        repo = await unit_env.get(BlogPostRepository)
        writer, other = make_user(), make_user()
        post = make_blog_post(writer, category="Guides", tags=["tyres", "winter"])
        same_author = make_blog_post(writer, category="News", tags=[])
        same_category = make_blog_post(other, category="Guides", tags=[])
        one_tag = make_blog_post(other, category="News", tags=["winter"])
        unrelated = make_blog_post(other, category="News", tags=["oil"])
        for p in (post, same_author, same_category, one_tag, unrelated):
            await repo.save(p)

        # Act
        related = await service.related_posts(post.id)

        # Assert
        assert [p.id for p in related] == [same_author.id, same_category.id, one_tag.id]

    @pytest.mark.asyncio
    async def test_related_posts_of_missing_post_raises_not_found(self, unit_env):
        service = await unit_env.get(BlogService)

        with pytest.raises(NotFoundError):
            await service.related_posts(uuid4())

    @pytest.mark.asyncio
    async def test_popular_tags_most_used_first(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        repo = await unit_env.get(BlogPostRepository)
        author = make_user()
        await repo.save(make_blog_post(author, tags=["tyres", "winter"]))
        await repo.save(make_blog_post(author, tags=["tyres", "brakes"]))
        await repo.save(make_blog_post(author, tags=["tyres", "winter"]))

        # Act
        tags = await service.popular_tags(count=2)

        # Assert
        assert tags == ["tyres", "winter"]

    @pytest.mark.asyncio
    async def test_list_posts_filters_by_tag(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        repo = await unit_env.get(BlogPostRepository)
        author = make_user()
        tagged = make_blog_post(author, tags=["brakes"])
        await repo.save(tagged)
        await repo.save(make_blog_post(author, tags=["oil"]))

        # Act
        posts, total = await service.list_posts(tag="brakes")

        # Assert
        assert total == 1
        assert posts[0].id == tagged.id


class TestDeletePosts:
    @pytest.mark.asyncio
    async def test_author_deletes_own_post(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR).as_caller()
        post = await service.create_post(author, _details())

        # Act
        await service.delete_post(author, post.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_post_by_id(post.id)

    @pytest.mark.asyncio
    async def test_bulk_delete_is_for_moderators(self, unit_env):
        # Arrange
        service = await unit_env.get(BlogService)
        author = make_user(role=UserRole.AUTHOR).as_caller()
        post = await service.create_post(author, _details())

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_posts(author, [post.id])
        deleted = await service.delete_posts(
            make_user(role=UserRole.MODERATOR).as_caller(), [post.id, uuid4()]
        )
        assert deleted == 1
