from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import InventoryItemViewSet

router = DefaultRouter()

# CRUD de productos + PATCH de cantidad + reporte de stock bajo
router.register(r'products', InventoryItemViewSet, basename='product')

urlpatterns = [
    path('', include(router.urls)),
]
