from board.views import PostViewSet
from django.urls import include, path
from rest_framework.routers import DefaultRouter

router = DefaultRouter()
router.register(r"", PostViewSet, basename="post")

urlpatterns = [
    path("", include(router.urls)),
]
