# stockwatch/urls.py
from django.contrib import admin
from django.urls import include, path

from .health import health_check_view

api_patterns = [
    path('', include('inventory.urls')),
    path('', include('staff.urls')),
]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include(api_patterns)),
    path('health/', health_check_view, name='health-check'),
]
