"""In-app purchase receipt verification against Apple and Google Play."""

import logging

import httpx
from django.conf import settings

from .exceptions import ReceiptVerificationError

logger = logging.getLogger(__name__)

GOOGLE_PLAY_PRODUCT_URL = (
    "https://androidpublisher.googleapis.com/androidpublisher/v3/applications/"
    "{package_name}/purchases/products/{product_id}/tokens/{token}"
)

PLATFORM_IOS = 'ios'
PLATFORM_ANDROID = 'android'


def verify_apple_receipt(*, product_id: str, receipt: str) -> bool:
    """
    Verify an App Store receipt.

    The receipt is valid when Apple reports status 0 and the purchased
    product matches product_id.
    """
    payload = {
        'receipt-data': receipt,
        'password': settings.APPLE_SHARED_SECRET,
    }
    try:
        response = httpx.post(
            settings.APPLE_VERIFY_URL,
            json=payload,
            timeout=settings.STORE_VERIFY_TIMEOUT,
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error("App Store verification request failed: %s", e)
        raise ReceiptVerificationError("Could not verify receipt with the App Store") from e

    data = response.json()
    if data.get('status') != 0:
        logger.warning("App Store rejected receipt with status %s", data.get('status'))
        return False

    purchases = data.get('latest_receipt_info') or data.get('receipt', {}).get('in_app') or []
    return any(item.get('product_id') == product_id for item in purchases)


def verify_google_receipt(*, product_id: str, receipt: str) -> bool:
    """
    Verify a Google Play purchase token.

    The token is valid when Google reports purchaseState 0 (purchased).
    """
    url = GOOGLE_PLAY_PRODUCT_URL.format(
        package_name=settings.GOOGLE_PLAY_PACKAGE_NAME,
        product_id=product_id,
        token=receipt,
    )
    headers = {'Authorization': f'Bearer {settings.GOOGLE_PLAY_ACCESS_TOKEN}'}
    try:
        response = httpx.get(url, headers=headers, timeout=settings.STORE_VERIFY_TIMEOUT)
    except httpx.HTTPError as e:
        logger.error("Google Play verification request failed: %s", e)
        raise ReceiptVerificationError("Could not verify receipt with Google Play") from e

    if response.status_code in (400, 404):
        logger.warning("Google Play does not know purchase token for %s", product_id)
        return False
    if response.is_error:
        logger.error("Google Play verification returned %s", response.status_code)
        raise ReceiptVerificationError("Could not verify receipt with Google Play")

    return response.json().get('purchaseState') == 0


def verify_store_receipt(*, platform: str, product_id: str, receipt: str) -> bool:
    """
    Dispatch receipt verification by platform.

    Raises:
        ReceiptVerificationError: If the platform is unknown or the store
            could not be reached
    """
    if platform == PLATFORM_IOS:
        return verify_apple_receipt(product_id=product_id, receipt=receipt)
    if platform == PLATFORM_ANDROID:
        return verify_google_receipt(product_id=product_id, receipt=receipt)
    raise ReceiptVerificationError("Invalid platform")
