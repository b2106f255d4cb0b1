from django.urls import path

from .views import (
    CargoManifestConfirmView,
    CargoManifestRejectView,
    CargoManifestView,
    DraftMAWBConfirmView,
    DraftMAWBRejectView,
    DraftMAWBView,
)

urlpatterns = [
    path('<uuid:mawb_info_uuid>/cargo-manifest/', CargoManifestView.as_view(), name='cargo-manifest'),
    path('<uuid:mawb_info_uuid>/cargo-manifest/confirm', CargoManifestConfirmView.as_view(), name='cargo-manifest-confirm'),
    path('<uuid:mawb_info_uuid>/cargo-manifest/reject', CargoManifestRejectView.as_view(), name='cargo-manifest-reject'),
    path('<uuid:mawb_info_uuid>/draft-mawb/', DraftMAWBView.as_view(), name='draft-mawb'),
    path('<uuid:mawb_info_uuid>/draft-mawb/confirm', DraftMAWBConfirmView.as_view(), name='draft-mawb-confirm'),
    path('<uuid:mawb_info_uuid>/draft-mawb/reject', DraftMAWBRejectView.as_view(), name='draft-mawb-reject'),
]
