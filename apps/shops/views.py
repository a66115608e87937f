from rest_framework import viewsets, mixins, status, serializers as drf_serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django.conf import settings
from django.core.cache import caches
from django.db.models import Q
from django.urls.converters import UUIDConverter
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsAdmin, IsVendor, IsVendorOrAdmin
from .localization import LANGUAGES, list_countries
from .models import Category, Shop, ShopRequest
from .permissions import IsAdminOrReadOnly, IsShopOwnerOrAdmin
from .serializers import (
    CategorySerializer,
    ShopSerializer,
    ShopWriteSerializer,
    ShopListQuerySerializer,
    ShopRequestSerializer,
    ReviewSerializer,
    ReviewCreateSerializer,
    CountrySerializer,
    LanguageSerializer,
)
from .services import (
    create_category,
    update_category,
    create_shop,
    update_shop,
    submit_shop_request,
    approve_shop_request,
    reject_shop_request,
    add_review,
    toggle_favorite_shop,
    list_favorite_shops,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCategoryNameError,
    ShopRequestNotFoundError,
    DuplicateReviewError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class FavoriteToggleResponseSerializer(drf_serializers.Serializer):
    is_favorite = drf_serializers.BooleanField()
    message = drf_serializers.CharField()


class ShopPagination(PageNumberPagination):
    """Page/limit pagination for shop listings."""
    page_size = 20
    page_size_query_param = 'limit'
    max_page_size = 100


class CategoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Category CRUD operations.

    list: Active categories (admins see all)
    retrieve: Get a category
    create/update/destroy: Admin only
    """

    queryset = Category.objects.all()
    lookup_value_regex = UUIDConverter.regex
    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None

    def get_queryset(self):
        queryset = super().get_queryset()
        user = self.request.user
        if not (user.is_authenticated and user.is_admin):
            queryset = queryset.filter(is_active=True)
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = create_category(created_by=request.user, **serializer.validated_data)
        except (DuplicateCategoryError, InvalidCategoryNameError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        category = self.get_object()
        serializer = self.get_serializer(category, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            category = update_category(category_id=category.id, **serializer.validated_data)
        except (DuplicateCategoryError, InvalidCategoryNameError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CategorySerializer(category).data)


class ShopViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Shop operations.

    list: Approved shops, filterable by category and language (cached)
    create: Vendors create unapproved shops, admins approved ones
    retrieve: Get a shop
    update: Shop owner or admin
    destroy: Admin only
    """

    queryset = Shop.objects.select_related('category')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = ShopSerializer
    permission_classes = [AllowAny]
    pagination_class = ShopPagination

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsVendorOrAdmin()]
        if self.action in ['update', 'partial_update']:
            return [IsAuthenticated(), IsShopOwnerOrAdmin()]
        if self.action == 'destroy':
            return [IsAuthenticated(), IsAdmin()]
        if self.action in ['favorite', 'favorites']:
            return [IsAuthenticated()]
        if self.action == 'mine':
            return [IsAuthenticated(), IsVendorOrAdmin()]
        if self.action == 'reviews' and self.request.method == 'POST':
            return [IsAuthenticated()]
        return super().get_permissions()

    def get_queryset(self):
        """Unapproved shops are only visible to their vendor and admins."""
        queryset = super().get_queryset()
        user = self.request.user
        if user.is_authenticated and user.is_admin:
            return queryset
        if user.is_authenticated:
            return queryset.filter(Q(is_approved=True) | Q(vendor=user))
        return queryset.filter(is_approved=True)

    @extend_schema(
        parameters=[
            OpenApiParameter('category', OpenApiTypes.UUID, description='Filter by category'),
            OpenApiParameter('language', OpenApiTypes.STR, description='Filter by language code'),
            OpenApiParameter('page', OpenApiTypes.INT, description='Page number'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Page size (max 100)'),
        ],
    )
    def list(self, request, *args, **kwargs):
        query_serializer = ShopListQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        cache_key = 'shops:{category}:{language}:{page}:{limit}'.format(
            category=params.get('category', 'all'),
            language=params.get('language', 'all'),
            page=params['page'],
            limit=params['limit'],
        )
        feed_cache = caches['feed']
        data = feed_cache.get(cache_key)
        if data is None:
            queryset = Shop.objects.filter(is_approved=True).select_related('category')
            if 'category' in params:
                queryset = queryset.filter(category_id=params['category'])
            if params.get('language'):
                queryset = queryset.filter(language=params['language'])

            page = self.paginate_queryset(queryset.order_by('-created_at'))
            data = self.get_paginated_response(ShopSerializer(page, many=True).data).data
            feed_cache.set(cache_key, data, settings.SHOPS_CACHE_TTL)

        return Response(data)

    @extend_schema(request=ShopWriteSerializer, responses={201: ShopSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ShopWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        shop = create_shop(created_by=request.user, **serializer.validated_data)
        return Response(ShopSerializer(shop).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ShopWriteSerializer, responses={200: ShopSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        shop = self.get_object()
        serializer = ShopWriteSerializer(shop, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        shop = update_shop(shop=shop, updated_by=request.user, **serializer.validated_data)
        return Response(ShopSerializer(shop).data)

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            200: ReviewSerializer(many=True),
            201: ReviewSerializer,
            400: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['get', 'post'])
    def reviews(self, request, pk=None):
        """
        List or add reviews for a shop.

        GET  /api/shops/{id}/reviews/
        POST /api/shops/{id}/reviews/
        """
        shop = self.get_object()

        if request.method == 'GET':
            return Response(ReviewSerializer(shop.reviews.all(), many=True).data)

        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            review = add_review(shop=shop, user=request.user, **serializer.validated_data)
        except DuplicateReviewError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={200: FavoriteToggleResponseSerializer})
    @action(detail=True, methods=['post'])
    def favorite(self, request, pk=None):
        """
        Toggle the shop in the current user's favorites.

        POST /api/shops/{id}/favorite/
        """
        shop = self.get_object()
        is_favorite = toggle_favorite_shop(user=request.user, shop=shop)
        return Response({
            'is_favorite': is_favorite,
            'message': 'Added to favorites' if is_favorite else 'Removed from favorites',
        })

    @extend_schema(responses={200: ShopSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def favorites(self, request):
        """
        Current user's favorite shops.

        GET /api/shops/favorites/
        """
        shops = list_favorite_shops(user=request.user)
        return Response(ShopSerializer(shops, many=True).data)

    @extend_schema(responses={200: ShopSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def mine(self, request):
        """
        Shops owned by the current vendor, approved or not.

        GET /api/shops/mine/
        """
        shops = Shop.objects.filter(vendor=request.user).select_related('category')
        return Response(ShopSerializer(shops, many=True).data)


class ShopRequestViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for vendor shop requests.

    list: Admins see all requests, vendors their own
    create: Vendors submit a request
    approve/reject: Admin only
    """

    queryset = ShopRequest.objects.select_related('vendor', 'category')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = ShopRequestSerializer
    permission_classes = [IsAuthenticated, IsVendorOrAdmin]
    pagination_class = ShopPagination

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsVendor()]
        if self.action in ['approve', 'reject']:
            return [IsAuthenticated(), IsAdmin()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = super().get_queryset()
        user = self.request.user
        if not user.is_admin:
            queryset = queryset.filter(vendor=user)

        request_status = self.request.query_params.get('status')
        if request_status:
            queryset = queryset.filter(status=request_status)
        return queryset

    def perform_create(self, serializer):
        serializer.instance = submit_shop_request(
            vendor=self.request.user,
            **serializer.validated_data,
        )

    @extend_schema(request=None, responses={201: ShopSerializer, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """
        Approve a request and create the shop.

        POST /api/shops/requests/{id}/approve/
        """
        try:
            shop = approve_shop_request(request_id=pk)
        except ShopRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(ShopSerializer(shop).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={204: None, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        """
        Reject and remove a request.

        POST /api/shops/requests/{id}/reject/
        """
        try:
            reject_shop_request(request_id=pk)
        except ShopRequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: CountrySerializer(many=True)},
    description="List supported countries with their codes.",
    tags=['reference'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def countries(request):
    """Supported countries."""
    return Response(CountrySerializer(list_countries(), many=True).data)


@extend_schema(
    responses={200: LanguageSerializer(many=True)},
    description="List supported content languages.",
    tags=['reference'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def languages(request):
    """Supported languages."""
    return Response(LanguageSerializer(LANGUAGES, many=True).data)
