"""Likes and saves on rolls."""

import logging

from django.db import transaction
from django.db.models import F

from apps.accounts.models import User
from apps.rolls.models import Roll, SavedRoll
from .exceptions import (
    RollNotFoundError,
    AlreadyLikedError,
    NotLikedError,
    AlreadySavedError,
    NotSavedError,
)
from .roll_management import invalidate_feed_cache

logger = logging.getLogger(__name__)


def _locked_roll(roll_id) -> Roll:
    try:
        return Roll.objects.select_for_update().get(id=roll_id)
    except Roll.DoesNotExist:
        raise RollNotFoundError("Roll not found")


@transaction.atomic
def like_roll(*, roll_id, user: User) -> Roll:
    """
    Like a roll.

    Raises:
        RollNotFoundError: Roll does not exist
        AlreadyLikedError: User already liked it
    """
    roll = _locked_roll(roll_id)
    if roll.likes.filter(id=user.id).exists():
        raise AlreadyLikedError("You already liked this roll")

    roll.likes.add(user)
    Roll.objects.filter(id=roll.id).update(likes_count=F('likes_count') + 1)
    roll.refresh_from_db(fields=['likes_count'])

    invalidate_feed_cache()
    return roll


@transaction.atomic
def unlike_roll(*, roll_id, user: User) -> Roll:
    """
    Remove a like. The counter never drops below zero.

    Raises:
        RollNotFoundError: Roll does not exist
        NotLikedError: User has not liked it
    """
    roll = _locked_roll(roll_id)
    if not roll.likes.filter(id=user.id).exists():
        raise NotLikedError("You have not liked this roll")

    roll.likes.remove(user)
    Roll.objects.filter(id=roll.id, likes_count__gt=0).update(likes_count=F('likes_count') - 1)
    roll.refresh_from_db(fields=['likes_count'])

    invalidate_feed_cache()
    return roll


@transaction.atomic
def save_roll(*, roll_id, user: User) -> Roll:
    roll = _locked_roll(roll_id)
    _, created = SavedRoll.objects.get_or_create(user=user, roll=roll)
    if not created:
        raise AlreadySavedError("Roll already saved")

    Roll.objects.filter(id=roll.id).update(saves_count=F('saves_count') + 1)
    roll.refresh_from_db(fields=['saves_count'])
    invalidate_feed_cache()
    return roll


@transaction.atomic
def unsave_roll(*, roll_id, user: User) -> Roll:
    roll = _locked_roll(roll_id)
    deleted, _ = SavedRoll.objects.filter(user=user, roll=roll).delete()
    if not deleted:
        raise NotSavedError("Roll is not saved")

    Roll.objects.filter(id=roll.id, saves_count__gt=0).update(saves_count=F('saves_count') - 1)
    roll.refresh_from_db(fields=['saves_count'])
    invalidate_feed_cache()
    return roll


def list_saved_rolls(*, user: User):
    """Rolls saved by the user, most recently saved first."""
    return (
        Roll.objects
        .filter(saves__user=user)
        .select_related('shop', 'created_by')
        .order_by('-saves__created_at')
    )
