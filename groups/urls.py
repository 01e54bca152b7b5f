"""
Group API URL configuration.

The router generates (no trailing slashes):
- GET    /groups                 - List groups
- POST   /groups                 - Create a group
- GET    /groups/current         - Groups organized by the caller
- GET    /groups/{id}            - Group details
- PUT    /groups/{id}            - Update group
- PATCH  /groups/{id}            - Partial update
- DELETE /groups/{id}            - Delete group

- POST   /groups/{id}/images     - Add an image
- GET    /groups/{id}/venues     - List venues
- POST   /groups/{id}/venues     - Create a venue
- GET    /groups/{id}/events     - List events
- POST   /groups/{id}/events     - Create an event
- GET    /groups/{id}/members    - List members
- POST   /groups/{id}/members    - Request membership
- PUT    /groups/{id}/members    - Change membership status
- DELETE /groups/{id}/members    - Delete a membership
"""

from rest_framework.routers import SimpleRouter
from .views import GroupViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'groups', GroupViewSet, basename='group')

urlpatterns = router.urls
