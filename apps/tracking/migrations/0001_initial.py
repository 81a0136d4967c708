import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('onboarding', '0001_initial'),
        ('offers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RedemptionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(blank=True, max_length=100)),
                ('revealed_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('copied_at', models.DateTimeField(blank=True, null=True)),
                ('clicked_through_at', models.DateTimeField(blank=True, null=True)),
                ('redeemed_at', models.DateTimeField(blank=True, null=True)),
                ('status', models.CharField(choices=[('REVEALED', 'Revealed'), ('COPIED', 'Copied'), ('CLICKED', 'Clicked through'), ('REDEEMED', 'Redeemed')], db_index=True, default='REVEALED', max_length=10)),
                ('device_type', models.CharField(choices=[('MOBILE', 'Mobile'), ('DESKTOP', 'Desktop'), ('TABLET', 'Tablet')], default='MOBILE', max_length=10)),
                ('source', models.CharField(default='APP', max_length=50)),
                ('verified', models.BooleanField(default=False)),
                ('brand', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='redemption_records', to='onboarding.onlinebrand')),
                ('offer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='redemption_records', to='offers.onlineoffer')),
                ('student', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='redemption_records', to='onboarding.student')),
            ],
            options={
                'db_table': 'redemption_records',
                'ordering': ['-revealed_at'],
                'indexes': [
                    models.Index(fields=['offer', 'revealed_at'], name='redemption__offer_i_8e2f14_idx'),
                    models.Index(fields=['brand', 'revealed_at'], name='redemption__brand_i_3c9a60_idx'),
                ],
            },
        ),
    ]
