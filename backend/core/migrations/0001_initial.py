import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='MawbInfo',
            fields=[
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mawb', models.CharField(max_length=255)),
                ('date', models.DateField()),
                ('service_type', models.CharField(max_length=100)),
                ('shipping_type', models.CharField(max_length=100)),
                ('chargeable_weight', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'tbl_mawb_info',
                'indexes': [
                    models.Index(fields=['mawb'], name='tbl_mawb_in_mawb_5c1a7e_idx'),
                    models.Index(fields=['-date'], name='tbl_mawb_in_date_9b2f4d_idx'),
                ],
            },
        ),
    ]
