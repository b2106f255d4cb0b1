import uuid

from django.db import models


class DocumentStatus(models.TextChoices):
    DRAFT = 'Draft', 'Draft'
    PENDING = 'Pending', 'Pending'
    CONFIRMED = 'Confirmed', 'Confirmed'
    REJECTED = 'Rejected', 'Rejected'


class CargoManifest(models.Model):
    uuid = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # OneToOne: the database itself refuses a second manifest for the same MAWB.
    mawb_info = models.OneToOneField('core.MawbInfo', on_delete=models.CASCADE, related_name='cargo_manifest')
    mawb_number = models.CharField(max_length=255)
    port_of_discharge = models.CharField(max_length=255, blank=True, default='')
    flight_no = models.CharField(max_length=50, blank=True, default='')
    freight_date = models.CharField(max_length=50, blank=True, default='')
    shipper = models.TextField(blank=True, default='')
    consignee = models.TextField(blank=True, default='')
    total_ctn = models.CharField(max_length=50, blank=True, default='')
    transshipment = models.CharField(max_length=255, blank=True, default='')
    status = models.CharField(max_length=20, choices=DocumentStatus.choices, default=DocumentStatus.DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cargo_manifest'

    def __str__(self):
        return f"Cargo manifest {self.mawb_number}"


class CargoManifestItem(models.Model):
    cargo_manifest = models.ForeignKey(CargoManifest, on_delete=models.CASCADE, related_name='items')
    position = models.PositiveIntegerField(default=0)
    hawb_no = models.CharField(max_length=255, blank=True, default='')
    pkgs = models.CharField(max_length=50, blank=True, default='')
    gross_weight = models.CharField(max_length=50, blank=True, default='')
    destination = models.CharField(max_length=255, blank=True, default='')
    commodity = models.CharField(max_length=255, blank=True, default='')
    shipper_name_address = models.TextField(blank=True, default='')
    consignee_name_address = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'cargo_manifest_items'
        ordering = ['position', 'id']


class DraftMAWB(models.Model):
    uuid = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mawb_info = models.OneToOneField('core.MawbInfo', on_delete=models.CASCADE, related_name='draft_mawb')
    customer_uuid = models.CharField(max_length=64, blank=True, default='')
    airline_logo = models.CharField(max_length=255, blank=True, default='')
    airline_name = models.CharField(max_length=255, blank=True, default='')
    mawb = models.CharField(max_length=255, blank=True, default='')
    hawb = models.CharField(max_length=255, blank=True, default='')
    shipper_name_and_address = models.TextField(blank=True, default='')
    awb_issued_by = models.TextField(blank=True, default='')
    consignee_name_and_address = models.TextField(blank=True, default='')
    issuing_carrier_agent_name = models.TextField(blank=True, default='')
    accounting_information = models.TextField(blank=True, default='')
    agents_iata_code = models.CharField(max_length=50, blank=True, default='')
    account_no = models.CharField(max_length=50, blank=True, default='')
    airport_of_departure = models.CharField(max_length=255, blank=True, default='')
    reference_number = models.CharField(max_length=255, blank=True, default='')
    optional_shipping_info1 = models.CharField(max_length=255, blank=True, default='')
    optional_shipping_info2 = models.CharField(max_length=255, blank=True, default='')
    routing_to = models.CharField(max_length=50, blank=True, default='')
    routing_by = models.CharField(max_length=50, blank=True, default='')
    destination_to1 = models.CharField(max_length=50, blank=True, default='')
    destination_by1 = models.CharField(max_length=50, blank=True, default='')
    destination_to2 = models.CharField(max_length=50, blank=True, default='')
    destination_by2 = models.CharField(max_length=50, blank=True, default='')
    currency = models.CharField(max_length=3, blank=True, default='')
    chgs_code = models.CharField(max_length=10, blank=True, default='')
    wt_val_ppd = models.CharField(max_length=10, blank=True, default='')
    wt_val_coll = models.CharField(max_length=10, blank=True, default='')
    other_ppd = models.CharField(max_length=10, blank=True, default='')
    other_coll = models.CharField(max_length=10, blank=True, default='')
    declared_val_carriage = models.CharField(max_length=50, blank=True, default='')
    declared_val_customs = models.CharField(max_length=50, blank=True, default='')
    airport_of_destination = models.CharField(max_length=255, blank=True, default='')
    requested_flight_date1 = models.CharField(max_length=50, blank=True, default='')
    requested_flight_date2 = models.CharField(max_length=50, blank=True, default='')
    amount_of_insurance = models.CharField(max_length=50, blank=True, default='')
    handling_information = models.TextField(blank=True, default='')
    sci = models.CharField(max_length=50, blank=True, default='')
    prepaid = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    valuation_charge = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    tax = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    total_other_charges_due_agent = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    total_other_charges_due_carrier = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    total_prepaid = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    currency_conversion_rates = models.CharField(max_length=255, blank=True, default='')
    signature1 = models.CharField(max_length=255, blank=True, default='')
    signature2_date = models.DateField(blank=True, null=True)
    signature2_place = models.CharField(max_length=255, blank=True, default='')
    signature2_issuing = models.CharField(max_length=255, blank=True, default='')
    shipping_mark = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=DocumentStatus.choices, default=DocumentStatus.DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'draft_mawb'

    def __str__(self):
        return f"Draft MAWB {self.mawb}"


class DraftMAWBItem(models.Model):
    KG_LB_CHOICES = [('kg', 'kg'), ('lb', 'lb')]

    draft_mawb = models.ForeignKey(DraftMAWB, on_delete=models.CASCADE, related_name='items')
    position = models.PositiveIntegerField(default=0)
    pieces_rcp = models.CharField(max_length=50, blank=True, default='')
    gross_weight = models.DecimalField(max_digits=12, decimal_places=3, default=0)
    kg_lb = models.CharField(max_length=2, choices=KG_LB_CHOICES, default='kg')
    rate_class = models.CharField(max_length=10, blank=True, default='')
    total_volume = models.DecimalField(max_digits=12, decimal_places=3, default=0)
    chargeable_weight = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    rate_charge = models.DecimalField(max_digits=18, decimal_places=4, default=0)
    total = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    nature_and_quantity = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'draft_mawb_items'
        ordering = ['position', 'id']


class DraftMAWBItemDim(models.Model):
    item = models.ForeignKey(DraftMAWBItem, on_delete=models.CASCADE, related_name='dims')
    position = models.PositiveIntegerField(default=0)
    length = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    width = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    height = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    count = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    class Meta:
        db_table = 'draft_mawb_item_dims'
        ordering = ['position', 'id']


class DraftMAWBCharge(models.Model):
    draft_mawb = models.ForeignKey(DraftMAWB, on_delete=models.CASCADE, related_name='charges')
    position = models.PositiveIntegerField(default=0)
    key = models.CharField(max_length=50)
    value = models.DecimalField(max_digits=18, decimal_places=2, default=0)

    class Meta:
        db_table = 'draft_mawb_charges'
        ordering = ['position', 'id']
