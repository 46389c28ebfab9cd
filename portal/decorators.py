from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect


def role_required(*roles):
    """
    Allow the view only for authenticated users whose role is in ``roles``.
    Anyone else signed in is sent back to their own dashboard.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            user = request.user

            if not user.is_authenticated:
                return redirect_to_login(request.get_full_path(), settings.LOGIN_URL)

            if getattr(user, "role", None) not in roles:
                messages.error(request, "Access denied.")
                return redirect("portal:dashboard")

            return view_func(request, *args, **kwargs)
        return _wrapped
    return decorator
