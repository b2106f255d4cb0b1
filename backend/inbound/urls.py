from django.urls import path

from .views import ManifestDetailView, ManifestListView, ManifestSummaryView

urlpatterns = [
    path('manifests/', ManifestListView.as_view(), name='inbound-manifest-list'),
    path('manifests/<uuid:header_uuid>/', ManifestDetailView.as_view(), name='inbound-manifest-detail'),
    path('manifests/<uuid:header_uuid>/summary', ManifestSummaryView.as_view(), name='inbound-manifest-summary'),
]
