from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsAdmin, IsVendorOrAdmin
from .models import VendorProfile
from .serializers import (
    RollPackageSerializer,
    VendorProfileSerializer,
    VendorDashboardSerializer,
    PackageCatalogEntrySerializer,
    ShareStatsSerializer,
    PurchasePackageInputSerializer,
    StorePurchaseInputSerializer,
    GrantPackageInputSerializer,
    RecordShareInputSerializer,
)
from .services import (
    get_or_create_vendor_profile,
    get_vendor_dashboard,
    spend_roll as spend_roll_service,
    list_packages as list_packages_service,
    purchase_package as purchase_package_service,
    purchase_store_package,
    grant_package as grant_package_service,
    record_share as record_share_service,
    get_share_stats,
    NotAVendorError,
    NoRollsAvailableError,
    InvalidPackageError,
    PaymentRequiredError,
    VendorProfileNotFoundError,
    ReceiptVerificationError,
    ReceiptAlreadyRedeemedError,
    ShareNotAllowedError,
    ShareCooldownError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class BalanceResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    available_rolls = drf_serializers.IntegerField()
    total_rolls_used = drf_serializers.IntegerField()


class PackageCatalogResponseSerializer(drf_serializers.Serializer):
    packages = PackageCatalogEntrySerializer(many=True)
    available_rolls = drf_serializers.IntegerField()


class PurchaseResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    package = RollPackageSerializer()
    available_rolls = drf_serializers.IntegerField()


class ShareResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    available_rolls = drf_serializers.IntegerField()
    total_shares = drf_serializers.IntegerField()
    rolls_earned = drf_serializers.IntegerField()


class VendorPagination(PageNumberPagination):
    """Custom pagination for vendor lists."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def get_client_ip(request):
    """Socket address of the caller. Forwarded headers are client-controlled and ignored."""
    return request.META.get('REMOTE_ADDR')


def _purchase_response(package, message):
    profile = package.vendor_profile
    profile.refresh_from_db(fields=['available_rolls'])
    return Response({
        'message': message,
        'package': RollPackageSerializer(package).data,
        'available_rolls': profile.available_rolls,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: VendorDashboardSerializer, 403: ErrorResponseSerializer},
    description="Get the current vendor's roll balance, linked shop and five most recent packages.",
    tags=['vendors'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def vendor_profile(request):
    """Vendor dashboard."""
    try:
        dashboard = get_vendor_dashboard(user=request.user)
    except NotAVendorError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(VendorDashboardSerializer(dashboard).data)


@extend_schema(
    request=None,
    responses={200: BalanceResponseSerializer, 400: ErrorResponseSerializer},
    description="Spend one roll credit.",
    tags=['vendors'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def spend_roll(request):
    """Spend one roll credit."""
    try:
        profile = spend_roll_service(user=request.user)
    except NoRollsAvailableError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotAVendorError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Roll spent successfully',
        'available_rolls': profile.available_rolls,
        'total_rolls_used': profile.total_rolls_used,
    })


@extend_schema(
    responses={200: PackageCatalogResponseSerializer},
    description="List purchasable roll packages and the caller's current balance.",
    tags=['vendors'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def list_packages(request):
    """Roll package catalogue."""
    profile = get_or_create_vendor_profile(user=request.user)
    return Response({
        'packages': PackageCatalogEntrySerializer(list_packages_service(), many=True).data,
        'available_rolls': profile.available_rolls,
    })


@extend_schema(
    request=PurchasePackageInputSerializer,
    responses={201: PurchaseResponseSerializer, 400: ErrorResponseSerializer},
    description="Purchase a catalogue package. Rolls plus bonus rolls are credited immediately.",
    tags=['vendors'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def purchase_package(request):
    """Purchase a catalogue package."""
    serializer = PurchasePackageInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        package = purchase_package_service(
            user=request.user,
            package_type=serializer.validated_data['package_type'],
        )
    except InvalidPackageError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotAVendorError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _purchase_response(package, 'Roll package purchased successfully')


@extend_schema(
    request=StorePurchaseInputSerializer,
    responses={201: PurchaseResponseSerializer, 400: ErrorResponseSerializer},
    description="Redeem an App Store or Google Play purchase receipt.",
    tags=['vendors'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def store_purchase(request):
    """Verify a store receipt and credit the package."""
    serializer = StorePurchaseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        package = purchase_store_package(user=request.user, **serializer.validated_data)
    except (InvalidPackageError, ReceiptVerificationError, ReceiptAlreadyRedeemedError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except NotAVendorError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _purchase_response(package, 'Purchase verified successfully')


@extend_schema(
    request=GrantPackageInputSerializer,
    responses={
        201: PurchaseResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Credit a paid package to a vendor (admin only).",
    tags=['vendors'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def grant_package(request):
    """Admin package grant."""
    serializer = GrantPackageInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        package = grant_package_service(**serializer.validated_data)
    except (InvalidPackageError, PaymentRequiredError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except VendorProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return _purchase_response(package, 'Roll package added successfully')


@extend_schema(
    responses={200: RollPackageSerializer(many=True)},
    description="List the current vendor's package history, newest first.",
    tags=['vendors'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsVendorOrAdmin])
def package_history(request):
    """Package purchase history."""
    profile = get_or_create_vendor_profile(user=request.user)
    paginator = VendorPagination()
    page = paginator.paginate_queryset(profile.packages.all(), request)
    return paginator.get_paginated_response(RollPackageSerializer(page, many=True).data)


@extend_schema(
    responses={200: VendorProfileSerializer(many=True)},
    description="List all vendor profiles (admin only).",
    tags=['vendors'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdmin])
def list_vendor_profiles(request):
    """All vendor profiles."""
    queryset = VendorProfile.objects.select_related('user').order_by('-created_at')
    paginator = VendorPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(VendorProfileSerializer(page, many=True).data)


@extend_schema(
    request=RecordShareInputSerializer,
    responses={
        200: ShareResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Record an app share and earn one roll credit (once per device per day).",
    tags=['vendors'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def record_share(request):
    """Share-to-earn."""
    serializer = RecordShareInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        profile = record_share_service(
            user=request.user,
            ip_address=get_client_ip(request),
            **serializer.validated_data,
        )
    except ShareNotAllowedError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except ShareCooldownError as e:
        return Response({
            'error': str(e),
            'next_share_available': e.next_share_available,
        }, status=status.HTTP_400_BAD_REQUEST)

    request.user.refresh_from_db(fields=['total_shares'])
    return Response({
        'message': 'Share recorded successfully! You earned 1 roll.',
        'available_rolls': profile.available_rolls,
        'total_shares': request.user.total_shares,
        'rolls_earned': 1,
    })


@extend_schema(
    responses={200: ShareStatsSerializer},
    description="Get share-to-earn statistics for the current user.",
    tags=['vendors'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def share_stats(request):
    """Share-to-earn statistics."""
    return Response(ShareStatsSerializer(get_share_stats(user=request.user)).data)
