import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.transactions import document_transaction, parse_uuid
from mawb_engine.errors import NotFound

from .models import PreImportManifest
from .serializers import (
    PreImportManifestHeaderSerializer,
    PreImportManifestSerializer,
    UploadSummarySerializer,
)
from .services.summary import build_manifest_summary

logger = logging.getLogger(__name__)


class ManifestListView(APIView):
    """GET lists pre-import manifest headers, POST creates one with its waybill rows."""

    def get(self, request):
        qs = PreImportManifest.objects.all().order_by("-created_at")
        mawb = request.query_params.get("mawb")
        if mawb:
            qs = qs.filter(mawb=mawb.strip())
        return Response(PreImportManifestHeaderSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        ser = PreImportManifestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        with document_transaction("create pre-import manifest"):
            header = ser.save()
        logger.info("Created pre-import manifest %s (%s), %d waybills", header.uuid, header.mawb, header.details.count())
        return Response(PreImportManifestSerializer(header).data, status=status.HTTP_201_CREATED)


class ManifestDetailView(APIView):
    def get(self, request, header_uuid):
        key = parse_uuid(header_uuid, field="header_uuid")
        header = PreImportManifest.objects.prefetch_related("details").filter(pk=key).first()
        if header is None:
            raise NotFound("pre-import manifest", key)
        return Response(PreImportManifestSerializer(header).data, status=status.HTTP_200_OK)


class ManifestSummaryView(APIView):
    """Fees per declaration and VAT/duty totals per customs category for one manifest."""

    def get(self, request, header_uuid):
        summary = build_manifest_summary(header_uuid)
        return Response(UploadSummarySerializer(summary).data, status=status.HTTP_200_OK)
