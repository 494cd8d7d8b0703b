import json
from pathlib import Path

from django.conf import settings
from django.http import Http404, HttpResponse
from django.urls import include, path, re_path
from django.views.generic import View
from django.views.static import serve

urlpatterns = [
    path('api/', include('api.urls')),
    re_path(r'^static/(?P<path>.*)$', serve, {'document_root': settings.STATIC_DIR}, name='static'),
]

CLIENT_CONFIG_MARKER = "/*__CHAT_CONFIG__*/"


class FrontendAppView(View):
    """Serves the single-page client with the chat config injected."""

    def get(self, request, *args, **kwargs):
        index_path = Path(settings.STATIC_DIR) / "index.html"
        if not index_path.exists():
            raise Http404("index.html not found in static folder")
        client_config = {
            "allowedUsers": sorted(settings.CHAT_ALLOWED_USERS),
            "pollIntervalMs": settings.CHAT_POLL_INTERVAL_MS,
        }
        html = index_path.read_text(encoding="utf-8").replace(
            CLIENT_CONFIG_MARKER,
            "window.CHAT_CONFIG = %s;" % json.dumps(client_config),
        )
        return HttpResponse(html, content_type='text/html')


urlpatterns += [
    re_path(r'^(?!api/|static/).*$', FrontendAppView.as_view(), name='frontend'),
]
