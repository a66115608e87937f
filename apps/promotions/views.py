from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django.urls.converters import UUIDConverter
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsAdmin, IsVendorOrAdmin
from apps.shops.permissions import IsShopOwnerOrAdmin
from .models import Offer, Coupon, Ad
from .serializers import OfferSerializer, CouponSerializer, AdSerializer, LocaleQuerySerializer
from .services import (
    personalize,
    check_shop_ownership,
    create_offer,
    create_coupon,
    update_coupon,
    active_coupons,
    create_ad,
    update_ad,
    list_active_ads,
    PromotionPermissionError,
    DuplicateCouponCodeError,
    InvalidAdLinkError,
)

MAX_OFFERS = 100

LOCALE_PARAMETERS = [
    OpenApiParameter('country', OpenApiTypes.STR, description="Country code or name (defaults to the user's)"),
    OpenApiParameter('language', OpenApiTypes.STR, description="Language code (defaults to the user's)"),
]


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class CouponPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'limit'
    max_page_size = 100


def _locale(request) -> dict:
    serializer = LocaleQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return {
        'user': request.user,
        'country': serializer.validated_data.get('country'),
        'language': serializer.validated_data.get('language'),
    }


class OfferViewSet(viewsets.ModelViewSet):
    """
    ViewSet for shop offers.

    list: Personalised for the viewer
    create: Vendors for their own shop, admins for any shop
    update/destroy: Shop owner or admin
    """

    queryset = Offer.objects.select_related('shop')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = OfferSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsVendorOrAdmin()]
        if self.action in ['update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsShopOwnerOrAdmin()]
        return super().get_permissions()

    @extend_schema(parameters=LOCALE_PARAMETERS)
    def list(self, request, *args, **kwargs):
        offers = personalize(self.get_queryset()[:MAX_OFFERS], **_locale(request))
        return Response(OfferSerializer(offers, many=True).data)

    @extend_schema(responses={201: OfferSerializer, 403: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            offer = create_offer(user=request.user, **serializer.validated_data)
        except PromotionPermissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(OfferSerializer(offer).data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        shop = serializer.validated_data.get('shop')
        if shop is not None:
            check_shop_ownership(user=self.request.user, shop=shop)
        serializer.save()

    def update(self, request, *args, **kwargs):
        try:
            return super().update(request, *args, **kwargs)
        except PromotionPermissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    @extend_schema(responses={200: OfferSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'shop/(?P<shop_id>{UUIDConverter.regex})')
    def by_shop(self, request, shop_id=None):
        """
        Offers of one shop, newest first.

        GET /api/offers/shop/{shop_id}/
        """
        offers = self.get_queryset().filter(shop_id=shop_id).order_by('-created_at')
        return Response(OfferSerializer(offers, many=True).data)


class CouponViewSet(viewsets.ModelViewSet):
    """
    ViewSet for shop coupons.

    list: Non-expired coupons, personalised and paginated
    create: Vendors for their own shop, admins for any shop
    update/destroy: Shop owner or admin
    """

    queryset = Coupon.objects.select_related('shop')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = CouponSerializer
    permission_classes = [AllowAny]
    pagination_class = CouponPagination

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsVendorOrAdmin()]
        if self.action in ['update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsShopOwnerOrAdmin()]
        return super().get_permissions()

    @extend_schema(
        parameters=LOCALE_PARAMETERS + [
            OpenApiParameter('page', OpenApiTypes.INT, description='Page number'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Page size (max 100)'),
        ],
    )
    def list(self, request, *args, **kwargs):
        coupons = personalize(active_coupons(), **_locale(request))
        page = self.paginate_queryset(coupons)
        return self.get_paginated_response(CouponSerializer(page, many=True).data)

    @extend_schema(responses={201: CouponSerializer, 400: ErrorResponseSerializer, 403: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            coupon = create_coupon(user=request.user, **serializer.validated_data)
        except PromotionPermissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except DuplicateCouponCodeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CouponSerializer(coupon).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        coupon = self.get_object()
        serializer = self.get_serializer(coupon, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            shop = serializer.validated_data.get('shop')
            if shop is not None:
                check_shop_ownership(user=request.user, shop=shop)
            coupon = update_coupon(coupon=coupon, **serializer.validated_data)
        except PromotionPermissionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except DuplicateCouponCodeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CouponSerializer(coupon).data)


class AdViewSet(viewsets.ModelViewSet):
    """
    ViewSet for ads.

    list: Active ads, personalised top 20 ordered by priority
    all: Every ad (admin)
    create/update/destroy: Admin only
    """

    queryset = Ad.objects.select_related('shop')
    lookup_value_regex = UUIDConverter.regex
    serializer_class = AdSerializer
    permission_classes = [IsAuthenticated, IsAdmin]
    pagination_class = None

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            return [AllowAny()]
        return super().get_permissions()

    @extend_schema(parameters=LOCALE_PARAMETERS)
    def list(self, request, *args, **kwargs):
        return Response(AdSerializer(list_active_ads(**_locale(request)), many=True).data)

    @extend_schema(responses={200: AdSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def all(self, request):
        """
        Every ad, active or not.

        GET /api/ads/all/
        """
        return Response(AdSerializer(self.get_queryset(), many=True).data)

    @extend_schema(responses={201: AdSerializer, 400: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            ad = create_ad(created_by=request.user, **serializer.validated_data)
        except InvalidAdLinkError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AdSerializer(ad).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        ad = self.get_object()
        serializer = self.get_serializer(ad, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            ad = update_ad(ad=ad, **serializer.validated_data)
        except InvalidAdLinkError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AdSerializer(ad).data)
