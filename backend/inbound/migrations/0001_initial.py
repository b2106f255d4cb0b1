import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PreImportManifest',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mawb', models.CharField(max_length=255)),
                ('flight_no', models.CharField(blank=True, default='', max_length=50)),
                ('arrival_date', models.DateField(blank=True, null=True)),
                ('origin', models.CharField(blank=True, default='', max_length=10)),
                ('is_enable_customs_ot', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'tbl_pre_import_manifest_header',
                'indexes': [
                    models.Index(fields=['mawb'], name='tbl_pre_imp_mawb_3e81c0_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PreImportManifestDetail',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField(default=0)),
                ('hawb_no', models.CharField(max_length=255)),
                ('category', models.CharField(blank=True, default='', max_length=10)),
                ('vat', models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ('duty', models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ('header', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='details', to='inbound.preimportmanifest')),
            ],
            options={
                'db_table': 'tbl_pre_import_manifest_details',
                'ordering': ['position', 'id'],
                'constraints': [
                    models.UniqueConstraint(fields=('header', 'hawb_no'), name='uniq_pre_import_detail_hawb'),
                ],
            },
        ),
    ]
