"""Category management service."""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.shops.models import Category
from .exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCategoryNameError,
)

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    cleaned = (name or '').strip()
    if not cleaned:
        raise InvalidCategoryNameError("Category name is required")
    return cleaned


@transaction.atomic
def create_category(
    *,
    created_by: User,
    name: str,
    icon: str = '',
    color: str = '',
    is_active: bool = True,
) -> Category:
    """
    Create a category with a unique (case-insensitive) name.

    Raises:
        InvalidCategoryNameError: If the name is blank
        DuplicateCategoryError: If the name is taken
    """
    name = _clean_name(name)
    if Category.objects.filter(name__iexact=name).exists():
        raise DuplicateCategoryError("Category with this name already exists")

    category = Category.objects.create(
        name=name,
        icon=icon,
        color=color,
        is_active=is_active,
        created_by=created_by,
    )
    logger.info("Category %s created by %s", category.name, created_by.email)
    return category


@transaction.atomic
def update_category(*, category_id: UUID, **fields) -> Category:
    """
    Update category fields. A new name must stay unique.

    Raises:
        CategoryNotFoundError: If the category does not exist
        DuplicateCategoryError: If the new name is taken
    """
    try:
        category = Category.objects.select_for_update().get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError("Category not found")

    if 'name' in fields:
        fields['name'] = _clean_name(fields['name'])
        duplicate = (
            Category.objects
            .filter(name__iexact=fields['name'])
            .exclude(id=category.id)
            .exists()
        )
        if duplicate:
            raise DuplicateCategoryError("Category with this name already exists")

    for field, value in fields.items():
        setattr(category, field, value)
    category.save()
    return category
