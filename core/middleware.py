"""
Security response headers for the JSON API.
"""


class ContentSecurityPolicyMiddleware:
    """
    Adds Content-Security-Policy header to all responses.
    The API serves only JSON, so nothing may be loaded or framed.
    """

    CSP_DIRECTIVES = {
        "default-src": "'none'",
        "frame-ancestors": "'none'",
        "base-uri": "'none'",
        "form-action": "'none'",
    }

    def __init__(self, get_response):
        self.get_response = get_response
        self.csp_value = "; ".join(
            f"{key} {value}" for key, value in self.CSP_DIRECTIVES.items()
        )

    def __call__(self, request):
        response = self.get_response(request)
        response["Content-Security-Policy"] = self.csp_value
        return response


class ReferrerPolicyMiddleware:
    """Sets the Referrer-Policy header."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        response["Referrer-Policy"] = "no-referrer"
        return response


class PermissionsPolicyMiddleware:
    """Sets the Permissions-Policy header (formerly Feature-Policy)."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        response["Permissions-Policy"] = (
            "camera=(), microphone=(), geolocation=(), payment=()"
        )
        return response
