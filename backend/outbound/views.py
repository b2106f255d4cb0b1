# outbound/views.py
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import CargoManifestSerializer, DraftMAWBSerializer, to_payload
from .services import upsert, workflow


class DocumentView(APIView):
    """GET returns the stored document, POST creates or fully replaces it."""
    serializer_class = None
    get_document = None
    upsert_document = None

    def get(self, request, mawb_info_uuid):
        document = self.get_document(mawb_info_uuid)
        return Response(self.serializer_class(document).data, status=status.HTTP_200_OK)

    def post(self, request, mawb_info_uuid):
        ser = self.serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)
        document = self.upsert_document(mawb_info_uuid, to_payload(ser.validated_data))
        return Response(self.serializer_class(document).data, status=status.HTTP_200_OK)


class DocumentStatusView(APIView):
    change_status = None

    def post(self, request, mawb_info_uuid):
        document = self.change_status(mawb_info_uuid)
        return Response(
            {"uuid": str(document.uuid), "status": document.status},
            status=status.HTTP_200_OK,
        )


# ---- Cargo manifest ----
class CargoManifestView(DocumentView):
    serializer_class = CargoManifestSerializer
    get_document = staticmethod(upsert.get_cargo_manifest)
    upsert_document = staticmethod(upsert.upsert_cargo_manifest)


class CargoManifestConfirmView(DocumentStatusView):
    change_status = staticmethod(workflow.confirm_cargo_manifest)


class CargoManifestRejectView(DocumentStatusView):
    change_status = staticmethod(workflow.reject_cargo_manifest)


# ---- Draft MAWB ----
class DraftMAWBView(DocumentView):
    serializer_class = DraftMAWBSerializer
    get_document = staticmethod(upsert.get_draft_mawb)
    upsert_document = staticmethod(upsert.upsert_draft_mawb)


class DraftMAWBConfirmView(DocumentStatusView):
    change_status = staticmethod(workflow.confirm_draft_mawb)


class DraftMAWBRejectView(DocumentStatusView):
    change_status = staticmethod(workflow.reject_draft_mawb)
