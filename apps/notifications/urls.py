from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.notification_list, name='notification-list'),
    path('<int:pk>/read/', views.mark_read, name='notification-read'),
]
