"""
Custom error handlers – JSON bodies instead of HTML error pages.
"""
from django.http import JsonResponse


def handler404(request, exception=None):
    """Custom 404 error handler."""
    return JsonResponse({'error': 'Not found'}, status=404)


def handler500(request):
    """Custom 500 error handler - sanitize error details in production."""
    return JsonResponse({'error': 'Internal server error'}, status=500)


def handler403(request, exception=None):
    """Custom 403 error handler."""
    return JsonResponse({'error': 'Forbidden'}, status=403)


def handler400(request, exception=None):
    """Custom 400 error handler."""
    return JsonResponse({'error': 'Bad request'}, status=400)
