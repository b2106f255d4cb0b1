from django.urls import path

from .views import MawbInfoDetailView, MawbInfoListView

urlpatterns = [
    path('', MawbInfoListView.as_view(), name='mawb-info-list'),
    path('<uuid:mawb_info_uuid>/', MawbInfoDetailView.as_view(), name='mawb-info-detail'),
]
