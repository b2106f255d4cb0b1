import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CargoManifest',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mawb_info', models.OneToOneField('core.mawbinfo', on_delete=django.db.models.deletion.CASCADE, related_name='cargo_manifest')),
                ('mawb_number', models.CharField(max_length=255)),
                ('port_of_discharge', models.CharField(max_length=255, blank=True, default='')),
                ('flight_no', models.CharField(max_length=50, blank=True, default='')),
                ('freight_date', models.CharField(max_length=50, blank=True, default='')),
                ('shipper', models.TextField(blank=True, default='')),
                ('consignee', models.TextField(blank=True, default='')),
                ('total_ctn', models.CharField(max_length=50, blank=True, default='')),
                ('transshipment', models.CharField(max_length=255, blank=True, default='')),
                ('status', models.CharField(max_length=20, choices=[('Draft', 'Draft'), ('Pending', 'Pending'), ('Confirmed', 'Confirmed'), ('Rejected', 'Rejected')], default='Draft')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'cargo_manifest',
            },
        ),
        migrations.CreateModel(
            name='CargoManifestItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cargo_manifest', models.ForeignKey('outbound.cargomanifest', on_delete=django.db.models.deletion.CASCADE, related_name='items')),
                ('position', models.PositiveIntegerField(default=0)),
                ('hawb_no', models.CharField(max_length=255, blank=True, default='')),
                ('pkgs', models.CharField(max_length=50, blank=True, default='')),
                ('gross_weight', models.CharField(max_length=50, blank=True, default='')),
                ('destination', models.CharField(max_length=255, blank=True, default='')),
                ('commodity', models.CharField(max_length=255, blank=True, default='')),
                ('shipper_name_address', models.TextField(blank=True, default='')),
                ('consignee_name_address', models.TextField(blank=True, default='')),
            ],
            options={
                'db_table': 'cargo_manifest_items',
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='DraftMAWB',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mawb_info', models.OneToOneField('core.mawbinfo', on_delete=django.db.models.deletion.CASCADE, related_name='draft_mawb')),
                ('customer_uuid', models.CharField(max_length=64, blank=True, default='')),
                ('airline_logo', models.CharField(max_length=255, blank=True, default='')),
                ('airline_name', models.CharField(max_length=255, blank=True, default='')),
                ('mawb', models.CharField(max_length=255, blank=True, default='')),
                ('hawb', models.CharField(max_length=255, blank=True, default='')),
                ('shipper_name_and_address', models.TextField(blank=True, default='')),
                ('awb_issued_by', models.TextField(blank=True, default='')),
                ('consignee_name_and_address', models.TextField(blank=True, default='')),
                ('issuing_carrier_agent_name', models.TextField(blank=True, default='')),
                ('accounting_information', models.TextField(blank=True, default='')),
                ('agents_iata_code', models.CharField(max_length=50, blank=True, default='')),
                ('account_no', models.CharField(max_length=50, blank=True, default='')),
                ('airport_of_departure', models.CharField(max_length=255, blank=True, default='')),
                ('reference_number', models.CharField(max_length=255, blank=True, default='')),
                ('optional_shipping_info1', models.CharField(max_length=255, blank=True, default='')),
                ('optional_shipping_info2', models.CharField(max_length=255, blank=True, default='')),
                ('routing_to', models.CharField(max_length=50, blank=True, default='')),
                ('routing_by', models.CharField(max_length=50, blank=True, default='')),
                ('destination_to1', models.CharField(max_length=50, blank=True, default='')),
                ('destination_by1', models.CharField(max_length=50, blank=True, default='')),
                ('destination_to2', models.CharField(max_length=50, blank=True, default='')),
                ('destination_by2', models.CharField(max_length=50, blank=True, default='')),
                ('currency', models.CharField(max_length=3, blank=True, default='')),
                ('chgs_code', models.CharField(max_length=10, blank=True, default='')),
                ('wt_val_ppd', models.CharField(max_length=10, blank=True, default='')),
                ('wt_val_coll', models.CharField(max_length=10, blank=True, default='')),
                ('other_ppd', models.CharField(max_length=10, blank=True, default='')),
                ('other_coll', models.CharField(max_length=10, blank=True, default='')),
                ('declared_val_carriage', models.CharField(max_length=50, blank=True, default='')),
                ('declared_val_customs', models.CharField(max_length=50, blank=True, default='')),
                ('airport_of_destination', models.CharField(max_length=255, blank=True, default='')),
                ('requested_flight_date1', models.CharField(max_length=50, blank=True, default='')),
                ('requested_flight_date2', models.CharField(max_length=50, blank=True, default='')),
                ('amount_of_insurance', models.CharField(max_length=50, blank=True, default='')),
                ('handling_information', models.TextField(blank=True, default='')),
                ('sci', models.CharField(max_length=50, blank=True, default='')),
                ('prepaid', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('valuation_charge', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('tax', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('total_other_charges_due_agent', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('total_other_charges_due_carrier', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('total_prepaid', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('currency_conversion_rates', models.CharField(max_length=255, blank=True, default='')),
                ('signature1', models.CharField(max_length=255, blank=True, default='')),
                ('signature2_date', models.DateField(blank=True, null=True)),
                ('signature2_place', models.CharField(max_length=255, blank=True, default='')),
                ('signature2_issuing', models.CharField(max_length=255, blank=True, default='')),
                ('shipping_mark', models.TextField(blank=True, default='')),
                ('status', models.CharField(max_length=20, choices=[('Draft', 'Draft'), ('Pending', 'Pending'), ('Confirmed', 'Confirmed'), ('Rejected', 'Rejected')], default='Draft')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'draft_mawb',
            },
        ),
        migrations.CreateModel(
            name='DraftMAWBItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('draft_mawb', models.ForeignKey('outbound.draftmawb', on_delete=django.db.models.deletion.CASCADE, related_name='items')),
                ('position', models.PositiveIntegerField(default=0)),
                ('pieces_rcp', models.CharField(max_length=50, blank=True, default='')),
                ('gross_weight', models.DecimalField(max_digits=12, decimal_places=3, default=0)),
                ('kg_lb', models.CharField(max_length=2, choices=[('kg', 'kg'), ('lb', 'lb')], default='kg')),
                ('rate_class', models.CharField(max_length=10, blank=True, default='')),
                ('total_volume', models.DecimalField(max_digits=12, decimal_places=3, default=0)),
                ('chargeable_weight', models.DecimalField(max_digits=12, decimal_places=2, default=0)),
                ('rate_charge', models.DecimalField(max_digits=18, decimal_places=4, default=0)),
                ('total', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
                ('nature_and_quantity', models.TextField(blank=True, default='')),
            ],
            options={
                'db_table': 'draft_mawb_items',
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='DraftMAWBItemDim',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item', models.ForeignKey('outbound.draftmawbitem', on_delete=django.db.models.deletion.CASCADE, related_name='dims')),
                ('position', models.PositiveIntegerField(default=0)),
                ('length', models.DecimalField(max_digits=10, decimal_places=2, default=0)),
                ('width', models.DecimalField(max_digits=10, decimal_places=2, default=0)),
                ('height', models.DecimalField(max_digits=10, decimal_places=2, default=0)),
                ('count', models.DecimalField(max_digits=10, decimal_places=2, default=0)),
            ],
            options={
                'db_table': 'draft_mawb_item_dims',
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='DraftMAWBCharge',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('draft_mawb', models.ForeignKey('outbound.draftmawb', on_delete=django.db.models.deletion.CASCADE, related_name='charges')),
                ('position', models.PositiveIntegerField(default=0)),
                ('key', models.CharField(max_length=50)),
                ('value', models.DecimalField(max_digits=18, decimal_places=2, default=0)),
            ],
            options={
                'db_table': 'draft_mawb_charges',
                'ordering': ['position', 'id'],
            },
        ),
    ]
