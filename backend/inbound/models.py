import uuid

from django.db import models


class PreImportManifest(models.Model):
    """Header of an inbound express pre-import manifest (one per arriving MAWB)."""
    uuid = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mawb = models.CharField(max_length=255)
    flight_no = models.CharField(max_length=50, blank=True, default='')
    arrival_date = models.DateField(null=True, blank=True)
    origin = models.CharField(max_length=10, blank=True, default='')
    # Charges the overtime customs fee on top of the regular one.
    is_enable_customs_ot = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tbl_pre_import_manifest_header'
        indexes = [
            models.Index(fields=['mawb'], name='tbl_pre_imp_mawb_3e81c0_idx'),
        ]

    def __str__(self):
        return self.mawb


class PreImportManifestDetail(models.Model):
    header = models.ForeignKey(PreImportManifest, on_delete=models.CASCADE, related_name='details')
    position = models.PositiveIntegerField(default=0)
    hawb_no = models.CharField(max_length=255)
    # Customs category code: "2" (VAT only), "3" (duty + VAT), anything else is grouped as other.
    category = models.CharField(max_length=10, blank=True, default='')
    vat = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    duty = models.DecimalField(max_digits=18, decimal_places=2, default=0)

    class Meta:
        db_table = 'tbl_pre_import_manifest_details'
        ordering = ['position', 'id']
        constraints = [
            models.UniqueConstraint(fields=['header', 'hawb_no'], name='uniq_pre_import_detail_hawb'),
        ]

    def __str__(self):
        return f"{self.header_id}:{self.hawb_no}"
