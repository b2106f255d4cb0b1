import uuid

from django.db import models


class MawbInfo(models.Model):
    """Owning record for the outbound documents of one master air waybill."""
    uuid = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mawb = models.CharField(max_length=255)
    date = models.DateField()
    service_type = models.CharField(max_length=100)
    shipping_type = models.CharField(max_length=100)
    chargeable_weight = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tbl_mawb_info'
        indexes = [
            models.Index(fields=['mawb'], name='tbl_mawb_in_mawb_5c1a7e_idx'),
            models.Index(fields=['-date'], name='tbl_mawb_in_date_9b2f4d_idx'),
        ]

    def __str__(self):
        return self.mawb
