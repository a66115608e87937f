"""Comments on rolls and comment likes."""

import logging

from django.db import transaction
from django.db.models import F

from apps.accounts.models import User
from apps.rolls.models import Roll, Comment
from .exceptions import (
    RollNotFoundError,
    CommentNotFoundError,
    InvalidCommentError,
    AlreadyLikedError,
    NotLikedError,
)

logger = logging.getLogger(__name__)


def _clean_text(text: str) -> str:
    text = (text or '').strip()
    if not text:
        raise InvalidCommentError("Comment cannot be empty")
    return text


@transaction.atomic
def create_comment(*, roll_id, user: User, comment: str) -> Comment:
    """
    Add a comment to a roll and bump its comment counter.

    Raises:
        RollNotFoundError: Roll does not exist
        InvalidCommentError: Comment is blank after trimming
    """
    text = _clean_text(comment)

    updated = Roll.objects.filter(id=roll_id).update(comments_count=F('comments_count') + 1)
    if not updated:
        raise RollNotFoundError("Roll not found")

    return Comment.objects.create(roll_id=roll_id, user=user, comment=text)


def list_comments(*, roll_id):
    if not Roll.objects.filter(id=roll_id).exists():
        raise RollNotFoundError("Roll not found")
    return Comment.objects.filter(roll_id=roll_id).select_related('user').order_by('-created_at')


def update_comment(*, comment: Comment, text: str) -> Comment:
    comment.comment = _clean_text(text)
    comment.save(update_fields=['comment', 'updated_at'])
    return comment


@transaction.atomic
def delete_comment(*, comment: Comment) -> None:
    """Delete a comment and decrement its roll's counter (never below zero)."""
    Roll.objects.filter(id=comment.roll_id, comments_count__gt=0).update(
        comments_count=F('comments_count') - 1
    )
    comment.delete()


def _locked_comment(comment_id) -> Comment:
    try:
        return Comment.objects.select_for_update().get(id=comment_id)
    except Comment.DoesNotExist:
        raise CommentNotFoundError("Comment not found")


@transaction.atomic
def like_comment(*, comment_id, user: User) -> Comment:
    comment = _locked_comment(comment_id)
    if comment.likes.filter(id=user.id).exists():
        raise AlreadyLikedError("You already liked this comment")

    comment.likes.add(user)
    Comment.objects.filter(id=comment.id).update(likes_count=F('likes_count') + 1)
    comment.refresh_from_db(fields=['likes_count'])
    return comment


@transaction.atomic
def unlike_comment(*, comment_id, user: User) -> Comment:
    comment = _locked_comment(comment_id)
    if not comment.likes.filter(id=user.id).exists():
        raise NotLikedError("You have not liked this comment")

    comment.likes.remove(user)
    Comment.objects.filter(id=comment.id, likes_count__gt=0).update(likes_count=F('likes_count') - 1)
    comment.refresh_from_db(fields=['likes_count'])
    return comment
