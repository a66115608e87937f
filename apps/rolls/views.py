from rest_framework import viewsets, mixins, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django.conf import settings
from django.core.cache import caches
from django.shortcuts import get_object_or_404
from django.urls.converters import UUIDConverter
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsVendorOrAdmin
from apps.vendors.services import NoRollsAvailableError, NotAVendorError
from .models import Roll, Comment
from .permissions import IsRollCreatorOrAdmin, CanDeleteRoll, IsCommentAuthor
from .serializers import (
    RollSerializer,
    RollCreateSerializer,
    RollCreateResponseSerializer,
    RollUpdateSerializer,
    FeedQuerySerializer,
    FeedResponseSerializer,
    CommentSerializer,
    CommentWriteSerializer,
)
from .services import (
    create_roll,
    update_roll,
    delete_roll,
    list_shop_rolls,
    share_roll,
    get_feed,
    interaction_flags,
    like_roll,
    unlike_roll,
    save_roll,
    unsave_roll,
    list_saved_rolls,
    create_comment,
    list_comments,
    update_comment,
    delete_comment,
    like_comment,
    unlike_comment,
    RollNotFoundError,
    ShopNotFoundError,
    ShopNotApprovedError,
    RollPermissionError,
    AlreadyLikedError,
    NotLikedError,
    AlreadySavedError,
    NotSavedError,
    InvalidCommentError,
    CommentNotFoundError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class LikeResponseSerializer(drf_serializers.Serializer):
    likes_count = drf_serializers.IntegerField()
    is_liked = drf_serializers.BooleanField()


class SaveResponseSerializer(drf_serializers.Serializer):
    saves_count = drf_serializers.IntegerField()
    is_saved = drf_serializers.BooleanField()


class ShareResponseSerializer(drf_serializers.Serializer):
    shares_count = drf_serializers.IntegerField()


def _current_user(request):
    return request.user if request.user.is_authenticated else None


def _roll_context(request, rolls):
    liked_ids, saved_ids = interaction_flags(
        user=_current_user(request),
        roll_ids=[roll.id for roll in rolls],
    )
    return {'request': request, 'liked_ids': liked_ids, 'saved_ids': saved_ids}


class RollViewSet(viewsets.ModelViewSet):
    """
    ViewSet for rolls.

    list: Cursor-paginated feed (cached)
    create: Vendors (one roll credit) and admins
    retrieve: Get a roll
    update: Creator or admin
    destroy: Creator, shop owner or admin
    """

    queryset = Roll.objects.select_related('shop', 'created_by')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = RollSerializer
    permission_classes = [AllowAny]
    pagination_class = None
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsVendorOrAdmin()]
        if self.action in ['update', 'partial_update']:
            return [IsAuthenticated(), IsRollCreatorOrAdmin()]
        if self.action == 'destroy':
            return [IsAuthenticated(), CanDeleteRoll()]
        if self.action in ['like', 'unlike', 'bookmark', 'unbookmark', 'saved']:
            return [IsAuthenticated()]
        if self.action == 'comments' and self.request.method == 'POST':
            return [IsAuthenticated()]
        return super().get_permissions()

    @extend_schema(
        parameters=[
            OpenApiParameter('category', OpenApiTypes.STR, description="Category filter ('all' for every roll)"),
            OpenApiParameter('cursor', OpenApiTypes.DATETIME, description='Return rolls created before this moment'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Page size (default 20, max 100)'),
        ],
        responses={200: FeedResponseSerializer},
    )
    def list(self, request, *args, **kwargs):
        query_serializer = FeedQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        user = _current_user(request)
        cache_key = 'rolls:{category}:{cursor}:{limit}:{user}'.format(
            category=params.get('category', 'all'),
            cursor=params['cursor'].isoformat() if params.get('cursor') else 'start',
            limit=params['limit'],
            user=user.id if user else 'anon',
        )
        feed_cache = caches['rolls']
        data = feed_cache.get(cache_key)
        if data is None:
            feed = get_feed(
                user=user,
                category=params.get('category'),
                cursor=params.get('cursor'),
                limit=params['limit'],
            )
            context = {
                'request': request,
                'liked_ids': feed['liked_ids'],
                'saved_ids': feed['saved_ids'],
            }
            data = {
                'rolls': RollSerializer(feed['rolls'], many=True, context=context).data,
                'next_cursor': feed['next_cursor'].isoformat() if feed['next_cursor'] else None,
                'has_more': feed['has_more'],
            }
            feed_cache.set(cache_key, data, settings.FEED_CACHE_TTL)

        return Response(data)

    def retrieve(self, request, *args, **kwargs):
        roll = self.get_object()
        return Response(RollSerializer(roll, context=_roll_context(request, [roll])).data)

    @extend_schema(
        request=RollCreateSerializer,
        responses={
            201: RollCreateResponseSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def create(self, request, *args, **kwargs):
        serializer = RollCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            roll, remaining = create_roll(user=request.user, **serializer.validated_data)
        except ShopNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (RollPermissionError, NotAVendorError) as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (ShopNotApprovedError, NoRollsAvailableError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'roll': RollSerializer(roll, context={'request': request}).data,
            'remaining_rolls': remaining,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(request=RollUpdateSerializer, responses={200: RollSerializer})
    def update(self, request, *args, **kwargs):
        roll = self.get_object()
        serializer = RollUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        roll = update_roll(roll=roll, **serializer.validated_data)
        return Response(RollSerializer(roll, context=_roll_context(request, [roll])).data)

    def destroy(self, request, *args, **kwargs):
        delete_roll(roll=self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: RollSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'shop/(?P<shop_id>{UUIDConverter.regex})')
    def by_shop(self, request, shop_id=None):
        """
        Rolls of one shop, newest first.

        GET /api/rolls/shop/{shop_id}/
        """
        rolls = list(list_shop_rolls(shop_id=shop_id))
        return Response(RollSerializer(rolls, many=True, context=_roll_context(request, rolls)).data)

    @extend_schema(request=None, responses={200: LikeResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """POST /api/rolls/{id}/like/"""
        try:
            roll = like_roll(roll_id=pk, user=request.user)
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyLikedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'likes_count': roll.likes_count, 'is_liked': True})

    @extend_schema(request=None, responses={200: LikeResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def unlike(self, request, pk=None):
        """POST /api/rolls/{id}/unlike/"""
        try:
            roll = unlike_roll(roll_id=pk, user=request.user)
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotLikedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'likes_count': roll.likes_count, 'is_liked': False})

    @extend_schema(request=None, responses={200: ShareResponseSerializer})
    @action(detail=True, methods=['post'])
    def share(self, request, pk=None):
        """POST /api/rolls/{id}/share/"""
        try:
            roll = share_roll(roll_id=pk)
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'shares_count': roll.shares_count})

    @extend_schema(request=None, responses={200: SaveResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'], url_path='save')
    def bookmark(self, request, pk=None):
        """POST /api/rolls/{id}/save/"""
        try:
            roll = save_roll(roll_id=pk, user=request.user)
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadySavedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'saves_count': roll.saves_count, 'is_saved': True})

    @extend_schema(request=None, responses={200: SaveResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'], url_path='unsave')
    def unbookmark(self, request, pk=None):
        """POST /api/rolls/{id}/unsave/"""
        try:
            roll = unsave_roll(roll_id=pk, user=request.user)
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotSavedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'saves_count': roll.saves_count, 'is_saved': False})

    @extend_schema(responses={200: RollSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def saved(self, request):
        """
        Rolls saved by the current user.

        GET /api/rolls/saved/
        """
        rolls = list(list_saved_rolls(user=request.user))
        return Response(RollSerializer(rolls, many=True, context=_roll_context(request, rolls)).data)

    @extend_schema(
        request=CommentWriteSerializer,
        responses={
            200: CommentSerializer(many=True),
            201: CommentSerializer,
            400: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['get', 'post'])
    def comments(self, request, pk=None):
        """
        List or add comments on a roll.

        GET  /api/rolls/{id}/comments/
        POST /api/rolls/{id}/comments/
        """
        if request.method == 'GET':
            try:
                comments = list(list_comments(roll_id=pk))
            except RollNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

            liked_ids = set()
            user = _current_user(request)
            if user and comments:
                liked_ids = set(
                    user.liked_comments
                    .filter(id__in=[c.id for c in comments])
                    .values_list('id', flat=True)
                )
            return Response(CommentSerializer(comments, many=True, context={'liked_ids': liked_ids}).data)

        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            comment = create_comment(
                roll_id=pk,
                user=request.user,
                comment=serializer.validated_data['comment'],
            )
        except RollNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCommentError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)


class CommentViewSet(
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for editing comments.

    update/destroy: Comment author only
    like/unlike: Any authenticated user
    """

    queryset = Comment.objects.select_related('user')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = CommentSerializer
    permission_classes = [IsAuthenticated, IsCommentAuthor]
    http_method_names = ['post', 'patch', 'delete', 'options']

    def get_permissions(self):
        if self.action in ['like', 'unlike']:
            return [IsAuthenticated()]
        return super().get_permissions()

    @extend_schema(request=CommentWriteSerializer, responses={200: CommentSerializer, 400: ErrorResponseSerializer})
    def update(self, request, *args, **kwargs):
        comment = self.get_object()
        serializer = CommentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            comment = update_comment(comment=comment, text=serializer.validated_data['comment'])
        except InvalidCommentError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CommentSerializer(comment).data)

    def destroy(self, request, *args, **kwargs):
        delete_comment(comment=self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: LikeResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """POST /api/rolls/comments/{id}/like/"""
        try:
            comment = like_comment(comment_id=pk, user=request.user)
        except CommentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except AlreadyLikedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'likes_count': comment.likes_count, 'is_liked': True})

    @extend_schema(request=None, responses={200: LikeResponseSerializer, 400: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def unlike(self, request, pk=None):
        """POST /api/rolls/comments/{id}/unlike/"""
        try:
            comment = unlike_comment(comment_id=pk, user=request.user)
        except CommentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotLikedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'likes_count': comment.likes_count, 'is_liked': False})
