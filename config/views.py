from django.http import JsonResponse

from apps.storage import get_store


def health_check(request):
    """Liveness probe reporting which entity store is serving requests."""
    return JsonResponse({
        'status': 'ok',
        'storage': get_store().backend_name,
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'kind': 'not_found',
        'message': 'Not found',
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'kind': 'internal',
        'message': 'Internal server error',
    }, status=500)
