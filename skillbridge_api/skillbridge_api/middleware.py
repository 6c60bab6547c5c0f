import logging
import time

from django.utils import timezone

logger = logging.getLogger('audit')


class UserActivityLoggingMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        # DRF copies the token-authenticated user back onto the Django request.
        user = getattr(request, 'user', None)
        user = user if user is not None and user.is_authenticated else "Anonymous"
        method = request.method
        path = request.get_full_path()
        ip = self.get_client_ip(request)
        timestamp = timezone.now().isoformat()

        logger.info(
            f"[{timestamp}] {user} - {method} {path} {response.status_code} - IP: {ip} - {elapsed_ms:.1f}ms"
        )

        return response

    def get_client_ip(self, request):
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')
