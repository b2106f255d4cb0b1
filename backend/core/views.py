import logging

from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from mawb_engine.errors import InvalidInput, NotFound

from .models import MawbInfo
from .serializers import MawbInfoSerializer
from .transactions import document_transaction, lock_mawb_info, parse_uuid

logger = logging.getLogger(__name__)


def _date_param(request, name):
    raw = request.query_params.get(name)
    if not raw:
        return None
    try:
        value = parse_date(raw)
    except ValueError:
        value = None
    if value is None:
        raise InvalidInput(f"expected YYYY-MM-DD, got {raw!r}", field=name)
    return value


class MawbInfoListView(APIView):
    """GET lists MAWB info records, newest date first; POST creates one."""

    def get(self, request):
        qs = MawbInfo.objects.all().order_by("-date", "-created_at")
        start = _date_param(request, "start_date")
        end = _date_param(request, "end_date")
        if start:
            qs = qs.filter(date__gte=start)
        if end:
            qs = qs.filter(date__lte=end)
        return Response(MawbInfoSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        ser = MawbInfoSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        with document_transaction("create mawb info"):
            info = ser.save()
        logger.info("Created mawb info %s (%s)", info.uuid, info.mawb)
        return Response(MawbInfoSerializer(info).data, status=status.HTTP_201_CREATED)


class MawbInfoDetailView(APIView):
    def get(self, request, mawb_info_uuid):
        key = parse_uuid(mawb_info_uuid)
        info = MawbInfo.objects.filter(pk=key).first()
        if info is None:
            raise NotFound("mawb info", key)
        return Response(MawbInfoSerializer(info).data, status=status.HTTP_200_OK)

    def delete(self, request, mawb_info_uuid):
        key = parse_uuid(mawb_info_uuid)
        # Cargo manifest and draft MAWB go with it (CASCADE).
        with document_transaction("delete mawb info"):
            info = lock_mawb_info(key)
            info.delete()
        logger.info("Deleted mawb info %s and its documents", key)
        return Response(status=status.HTTP_204_NO_CONTENT)
