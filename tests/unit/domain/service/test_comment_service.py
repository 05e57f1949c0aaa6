"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from autohub.domain.error import NotFoundError, PermissionDeniedError, ValidationError
from autohub.domain.repository import BlogPostRepository, CommentRepository
from autohub.domain.service import BlogService, CommentService
from autohub.domain.value import UserRole, UserStatus
from tests.conftest import make_blog_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


async def _seed_post(unit_env):
    post = make_blog_post(make_user(role=UserRole.AUTHOR))
    await (await unit_env.get(BlogPostRepository)).save(post)
    return post


class TestAddComment:
    @pytest.mark.asyncio
    async def test_comment_is_listed_under_its_post(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        reader = make_user(name="Reader")

        # Act
        comment = await service.add_comment(
            reader.as_caller(), post.id, "  Great tips ", avatar_url="https://img/r.png"
        )

        # Assert
        assert comment.text == "Great tips"
        assert comment.author_avatar_url == "https://img/r.png"
        listed = await service.list_for_post(post.id)
        assert [c.id for c in listed] == [comment.id]

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="BlogPost"):
            await service.add_comment(make_user().as_caller(), uuid4(), "Hello")

    @pytest.mark.asyncio
    async def test_listing_missing_post_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.list_for_post(uuid4())

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)

        with pytest.raises(ValidationError):
            await service.add_comment(make_user().as_caller(), post.id, "   ")

    @pytest.mark.asyncio
    async def test_suspended_user_cannot_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        suspended = make_user(status=UserStatus.SUSPENDED)

        with pytest.raises(PermissionDeniedError):
            await service.add_comment(suspended.as_caller(), post.id, "Hello")


class TestReplies:
    @pytest.mark.asyncio
    async def test_replies_accumulate_oldest_first(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        comment = await service.add_comment(make_user().as_caller(), post.id, "Question?")

        # Act
        await service.add_reply(make_user(name="A").as_caller(), comment.id, "First")
        updated = await service.add_reply(
            make_user(name="B").as_caller(), comment.id, "Second"
        )

        # Assert
        assert [r.text for r in updated.replies] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_reply_to_missing_comment_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment"):
            await service.add_reply(make_user().as_caller(), uuid4(), "Hello")

    @pytest.mark.asyncio
    async def test_reply_author_deletes_own_reply(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        comment = await service.add_comment(make_user().as_caller(), post.id, "Question?")
        replier = make_user()
        with_reply = await service.add_reply(replier.as_caller(), comment.id, "Answer")
        reply_id = with_reply.replies[0].id

        # Act
        remaining = await service.delete_reply(replier.as_caller(), comment.id, reply_id)

        # Assert
        assert remaining.replies == []

    @pytest.mark.asyncio
    async def test_comment_author_cannot_delete_someone_elses_reply(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        commenter = make_user()
        comment = await service.add_comment(commenter.as_caller(), post.id, "Question?")
        with_reply = await service.add_reply(make_user().as_caller(), comment.id, "Answer")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_reply(
                commenter.as_caller(), comment.id, with_reply.replies[0].id
            )

    @pytest.mark.asyncio
    async def test_unknown_reply_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        comment = await service.add_comment(make_user().as_caller(), post.id, "Question?")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Reply"):
            await service.delete_reply(
                make_user(role=UserRole.MODERATOR).as_caller(), comment.id, uuid4()
            )


class TestDeleteComment:
    @pytest.mark.asyncio
    async def test_moderator_deletes_any_comment(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        comment = await service.add_comment(make_user().as_caller(), post.id, "Spam")

        # Act
        await service.delete_comment(make_user(role=UserRole.MODERATOR).as_caller(), comment.id)

        # Assert
        assert await service.list_for_post(post.id) == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        comment = await service.add_comment(make_user().as_caller(), post.id, "Mine")

        with pytest.raises(PermissionDeniedError):
            await service.delete_comment(make_user().as_caller(), comment.id)

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment(make_user().as_caller(), uuid4())

    @pytest.mark.asyncio
    async def test_deleting_post_removes_its_comments(self, unit_env):
        # Arrange
        comments = await unit_env.get(CommentService)
        blog = await unit_env.get(BlogService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await _seed_post(unit_env)
        await comments.add_comment(make_user().as_caller(), post.id, "Nice")
        moderator = make_user(role=UserRole.MODERATOR).as_caller()

        # Act
        await blog.delete_post(moderator, post.id)

        # Assert
        assert await comment_repo.count() == 0


class TestListAllComments:
    @pytest.mark.asyncio
    async def test_only_moderators_list_every_comment(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        post = await _seed_post(unit_env)
        await service.add_comment(make_user().as_caller(), post.id, "One")
        await service.add_comment(make_user().as_caller(), post.id, "Two")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.list_all(make_user().as_caller())
        comments, total = await service.list_all(
            make_user(role=UserRole.MODERATOR).as_caller(), limit=1
        )
        assert total == 2
        assert len(comments) == 1
