from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'chitgroups'

# Router for ViewSets
router = SimpleRouter()
router.register(r'', views.ChitGroupViewSet, basename='chitgroup')

urlpatterns = [
    # GET    /api/chitgroups/                          - List scoped groups
    # POST   /api/chitgroups/                          - Create group (manager)
    # GET    /api/chitgroups/{id}/                     - Group details
    # PUT    /api/chitgroups/{id}/                     - Update group (owner)
    # PATCH  /api/chitgroups/{id}/                     - Partial update (owner)
    # GET    /api/chitgroups/{id}/members/             - List members
    # POST   /api/chitgroups/{id}/members/             - Add member (owner)
    # DELETE /api/chitgroups/{id}/members/{user_id}/   - Remove member (owner)
    # GET    /api/chitgroups/{id}/auctions/            - List auctions
    # POST   /api/chitgroups/{id}/auctions/            - Schedule auction (owner)
    path('', include(router.urls)),
]
