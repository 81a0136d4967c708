from django.db import connection, DatabaseError
from django.http import JsonResponse


def health_check(request):
    """Liveness check for the hosting platform; also pings the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        return JsonResponse({'status': 'error', 'database': 'unavailable'}, status=503)

    return JsonResponse({'status': 'ok', 'database': 'ok'})


def error_404(request, exception):
    """JSON 404 for non-API paths too."""
    return JsonResponse({
        'success': False,
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    return JsonResponse({
        'success': False,
        'error': 'Internal server error',
        'status': 500
    }, status=500)
