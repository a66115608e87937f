import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger('apps')


def health_check(request):
    """Liveness probe that also checks the database connection."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'connected'
        http_status = 200
    except DatabaseError:
        logger.exception("Health check could not reach the database")
        database = 'unavailable'
        http_status = 503

    return JsonResponse({
        'status': 'ok' if http_status == 200 else 'error',
        'timestamp': timezone.now().isoformat(),
        'database': database,
    }, status=http_status)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
