from rest_framework.routers import SimpleRouter
from .views import VenueViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'venues', VenueViewSet, basename='venue')

urlpatterns = router.urls
