from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import AdminProductVariantViewSet

router = DefaultRouter()

# Endpoints de staff: consulta de variantes y ajuste manual de stock
router.register(r'admin/variants', AdminProductVariantViewSet, basename='admin-variant')

urlpatterns = [
    path('', include(router.urls)),
]
