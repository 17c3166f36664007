from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # User profile
    path('user/', views.get_current_user_view, name='current-user'),
    path('users/<int:pk>/reset-password/', views.reset_password_view, name='reset-password'),

    # Customers of the authenticated manager
    path('customers/', views.customers, name='customers'),
]
