from django.conf import settings
from django.urls import path

from . import views

allowed = settings.CHAT_ALLOWED_USERS

urlpatterns = [
    path('login', views.LoginView.as_view(allowed_users=allowed), name='login'),
    path('login/', views.LoginView.as_view(allowed_users=allowed), name='login_slash'),

    path('messages', views.MessagesView.as_view(allowed_users=allowed), name='messages'),
    path('messages/', views.MessagesView.as_view(allowed_users=allowed), name='messages_slash'),

    path('formulas', views.FormulasView.as_view(), name='formulas'),
]
