from django.contrib import admin
from django.urls import path, include

from core import views

urlpatterns = [
    path('admin/', admin.site.urls),

    # liveness probe
    path('healthz', views.HealthView.as_view(), name='healthz'),

    # service metadata + record APIs
    path('api', views.ApiIndexView.as_view(), name='api-index'),
    path('api/', include(('core.api_urls', 'core'), namespace='core-api')),
]
