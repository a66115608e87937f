from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import ShareShopInputSerializer, ShareShopResponseSerializer, TopSharedShopSerializer
from .services import (
    record_shop_share,
    leaderboard_country,
    top_shared_shops,
    ShopNotFoundError,
    InvalidCountryError,
    CountryRequiredError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    request=ShareShopInputSerializer,
    responses={200: ShareShopResponseSerializer, 404: ErrorResponseSerializer},
    description="Count a share of a shop. Signed-in users are attributed to their account country.",
    tags=['leaderboard'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def share_shop(request, shop_id):
    """Record a shop share."""
    serializer = ShareShopInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        shop = record_shop_share(
            shop_id=shop_id,
            country=serializer.validated_data.get('country'),
            user=request.user,
        )
    except ShopNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'share_count': shop.share_count})


@extend_schema(
    parameters=[
        OpenApiParameter('country', OpenApiTypes.STR, description='Country code or name (required for guests)'),
    ],
    responses={200: TopSharedShopSerializer(many=True), 400: ErrorResponseSerializer},
    description="Top shared shops of the latest week in a country.",
    tags=['leaderboard'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def top_shared(request):
    """Weekly top shared shops."""
    try:
        country_code = leaderboard_country(
            user=request.user,
            country=request.query_params.get('country'),
        )
    except (CountryRequiredError, InvalidCountryError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(top_shared_shops(country_code=country_code))
