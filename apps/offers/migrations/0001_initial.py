import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('onboarding', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Offer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('type', models.CharField(choices=[('percentage', 'Percentage'), ('flat', 'Flat'), ('bogo', 'Buy 1 Get 1'), ('freebie', 'Freebie'), ('custom', 'Custom')], max_length=20)),
                ('original_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('discount_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('discount_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('final_price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('max_discount', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('min_order_value', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('free_item_name', models.CharField(blank=True, max_length=200)),
                ('terms', models.JSONField(blank=True, default=list)),
                ('max_uses_per_student', models.PositiveIntegerField(blank=True, help_text='Leave empty for unlimited uses.', null=True)),
                ('valid_from', models.DateTimeField(default=django.utils.timezone.now)),
                ('valid_until', models.DateTimeField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('paused', 'Paused'), ('expired', 'Expired')], db_index=True, default='active', max_length=20)),
                ('total_redemptions', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('merchant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='onboarding.merchant')),
            ],
            options={
                'db_table': 'offers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['merchant', 'status'], name='offers_merchan_2c41d8_idx'),
                    models.Index(fields=['status', 'created_at'], name='offers_status_8f1e07_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OnlineOffer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('code', models.CharField(blank=True, max_length=100)),
                ('link', models.URLField(blank=True, max_length=500)),
                ('valid_until', models.DateTimeField(blank=True, null=True)),
                ('location_scope', models.CharField(choices=[('PAN_INDIA', 'Pan India'), ('STATE', 'Selected states'), ('CITY', 'Selected cities')], default='PAN_INDIA', max_length=20)),
                ('location_values', models.JSONField(blank=True, default=list)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('brand', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='onboarding.onlinebrand')),
            ],
            options={
                'db_table': 'online_offers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['brand', 'is_active'], name='online_offe_brand_i_7b3a52_idx'),
                ],
            },
        ),
    ]
