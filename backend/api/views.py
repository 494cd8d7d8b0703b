import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import View

from .errors import AuthorizationError, ChatError, StorageError, ValidationError
from .forms import LoginForm, MessageForm
from .formulas import formula_sections
from .store import get_store

logger = logging.getLogger(__name__)


def _no_cache_json(data, status=200):
    response = JsonResponse(data, status=status, safe=isinstance(data, dict))
    response["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    response["Pragma"] = "no-cache"
    response["Expires"] = "0"
    return response


def _read_json(request, invalid_message):
    try:
        data = json.loads(request.body)
    except ValueError:
        raise ValidationError(invalid_message)
    if not isinstance(data, dict):
        raise ValidationError(invalid_message)
    return data


@method_decorator(csrf_exempt, name="dispatch")
class ChatApiView(View):
    """
    Base for the JSON endpoints.

    ``allowed_users`` and ``store`` are supplied through ``as_view()`` so the
    allow-list is configuration, not route logic. ``ChatError`` raised by a
    handler becomes a JSON response; storage details and any other failure
    are logged and answered with a generic 500.
    """

    allowed_users = frozenset()
    store = None
    storage_error_message = "Internal server error"

    def get_message_store(self):
        if self.store is None:
            return get_store()
        return self.store

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except StorageError as e:
            logger.exception("%s %s failed: %s", request.method, request.path, e.message)
            return _no_cache_json({"message": self.storage_error_message}, status=e.status)
        except ChatError as e:
            return _no_cache_json({"message": e.message}, status=e.status)
        except Exception:
            logger.exception("%s %s failed", request.method, request.path)
            return _no_cache_json({"message": self.storage_error_message}, status=500)

    def is_allowed(self, username):
        return username in self.allowed_users


class LoginView(ChatApiView):
    http_method_names = ["post"]

    def denied_message(self):
        names = " and ".join(sorted(self.allowed_users))
        return f"Access denied. This is a private chat for {names} only."

    def post(self, request):
        form = LoginForm(_read_json(request, "Invalid username"))
        if not form.is_valid():
            raise ValidationError("Invalid username")
        username = form.cleaned_data["username"]

        if not self.is_allowed(username):
            logger.warning("[LOGIN] rejected username=%r", username)
            raise AuthorizationError(self.denied_message())

        store = self.get_message_store()
        user = store.get_user_by_username(username)
        if user is None:
            user = store.create_user(username)
            logger.info("[LOGIN] created user id=%s username=%s", user.id, username)
        logger.info("[LOGIN] username=%s", username)
        return _no_cache_json({"user": user.to_dict()})


class MessagesView(ChatApiView):
    http_method_names = ["get", "post", "delete"]

    def get(self, request):
        self.storage_error_message = "Failed to fetch messages"
        messages = self.get_message_store().get_all_messages()
        return _no_cache_json({"messages": [m.to_dict() for m in messages]})

    def post(self, request):
        self.storage_error_message = "Failed to send message"
        form = MessageForm(_read_json(request, "Invalid message data"))
        if not form.is_valid():
            raise ValidationError("Invalid message data")
        sender = form.cleaned_data["sender"]
        text = form.cleaned_data["text"]

        if not self.is_allowed(sender):
            logger.warning("[SEND] rejected sender=%r", sender)
            raise AuthorizationError("Unauthorized sender")

        message = self.get_message_store().create_message(sender=sender, text=text)
        logger.info("[SEND] id=%s sender=%s length=%d", message.id, sender, len(text))
        return _no_cache_json({"message": message.to_dict()})

    def delete(self, request):
        # No server-side authorization here; the client asks for confirmation.
        self.storage_error_message = "Failed to delete messages"
        deleted_count = self.get_message_store().delete_all_messages()
        logger.info("[NUKE] deleted_count=%s remote=%s", deleted_count, request.META.get("REMOTE_ADDR"))
        return _no_cache_json({"message": "All messages deleted"})


class FormulasView(View):
    http_method_names = ["get"]

    def get(self, request):
        return JsonResponse({"sections": formula_sections()})
