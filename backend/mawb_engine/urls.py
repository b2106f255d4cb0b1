from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/mawbinfo/', include('core.urls')),
    path('api/mawbinfo/', include('outbound.urls')),
    path('api/inbound/', include('inbound.urls')),
]
