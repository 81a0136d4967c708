from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # Device passcode quick login
    path('passcode/', views.setup_passcode, name='passcode-setup'),
    path('passcode/login/', views.passcode_login, name='passcode-login'),

    # User profile
    path('user/', views.get_current_user, name='current-user'),
]
