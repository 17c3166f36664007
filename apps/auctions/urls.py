from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'auctions'

router = SimpleRouter()
router.register(r'', views.AuctionViewSet, basename='auction')

urlpatterns = [
    # GET    /api/auctions/{id}/        - Auction details
    # PUT    /api/auctions/{id}/        - Status transition (owner)
    # PATCH  /api/auctions/{id}/        - Same as PUT
    # GET    /api/auctions/{id}/bids/   - List bids
    # POST   /api/auctions/{id}/bids/   - Place bid (member, scheduled only)
    path('', include(router.urls)),
]
