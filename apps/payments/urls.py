from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'payments'

router = SimpleRouter()
router.register(r'', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # GET    /api/payments/?chit_group_id=   - List scoped payments
    # POST   /api/payments/                  - Record payment (owner)
    # GET    /api/payments/{id}/             - Payment details
    # PUT    /api/payments/{id}/             - Correct payment (owner)
    # PATCH  /api/payments/{id}/             - Same as PUT
    path('', include(router.urls)),
]
