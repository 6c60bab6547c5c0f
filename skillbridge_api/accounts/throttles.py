from rest_framework.throttling import SimpleRateThrottle


class EmailRateThrottle(SimpleRateThrottle):
    """Throttles login attempts per submitted email address."""
    scope = 'login'

    def get_cache_key(self, request, view):
        email = request.data.get('email')

        if not email or not isinstance(email, str):
            return None

        ident = email.lower().strip()

        return self.cache_format % {
            'scope': self.scope,
            'ident': ident
        }
