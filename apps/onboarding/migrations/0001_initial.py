import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


STATUS_CHOICES = [
    ('pending', 'Pending'),
    ('approved', 'Approved'),
    ('rejected', 'Rejected'),
    ('suspended', 'Suspended'),
]


def approval_fields():
    return [
        ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ('status', models.CharField(choices=STATUS_CHOICES, db_index=True, default='pending', max_length=20)),
        ('approved_at', models.DateTimeField(blank=True, null=True)),
        ('rejection_reason', models.TextField(blank=True)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='IdentifierSequence',
            fields=[
                ('prefix', models.CharField(max_length=10, primary_key=True, serialize=False)),
                ('last_value', models.PositiveIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
            ],
            options={
                'db_table': 'identifier_sequences',
            },
        ),
        migrations.CreateModel(
            name='OnlineBrand',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=200, unique=True)),
                ('website', models.URLField(blank=True, max_length=300)),
                ('logo_url', models.URLField(blank=True, max_length=500)),
                ('category', models.CharField(blank=True, max_length=50)),
                ('description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='brand_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'online_brands',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Student',
            fields=approval_fields() + [
                ('bb_id', models.CharField(blank=True, max_length=20, null=True, unique=True)),
                ('full_name', models.CharField(max_length=150)),
                ('email', models.EmailField(max_length=255)),
                ('phone', models.CharField(blank=True, max_length=20)),
                ('college', models.CharField(max_length=200)),
                ('city', models.CharField(max_length=100)),
                ('state', models.CharField(max_length=100)),
                ('profile_image_url', models.URLField(blank=True, max_length=500)),
                ('total_savings', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('total_redemptions', models.PositiveIntegerField(default=0)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='student_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'students',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='students_status_9d2e41_idx'),
                    models.Index(fields=['city'], name='students_city_5a7c10_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Merchant',
            fields=approval_fields() + [
                ('bbm_id', models.CharField(blank=True, max_length=20, null=True, unique=True)),
                ('business_name', models.CharField(max_length=200)),
                ('owner_name', models.CharField(max_length=150)),
                ('email', models.EmailField(max_length=255)),
                ('phone', models.CharField(max_length=20)),
                ('category', models.CharField(db_index=True, max_length=50)),
                ('description', models.TextField(blank=True)),
                ('address', models.CharField(max_length=300)),
                ('city', models.CharField(max_length=100)),
                ('state', models.CharField(max_length=100)),
                ('pin_code', models.CharField(blank=True, max_length=10)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('logo_url', models.URLField(blank=True, max_length=500)),
                ('cover_photo_url', models.URLField(blank=True, max_length=500)),
                ('is_online_store', models.BooleanField(default=False)),
                ('trending_score', models.PositiveIntegerField(default=0)),
                ('is_trending_override', models.BooleanField(default=False)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='merchant_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'merchants',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='merchants_status_1b8f33_idx'),
                    models.Index(fields=['city', 'category'], name='merchants_city_6c0d72_idx'),
                    models.Index(fields=['trending_score'], name='merchants_trendin_e4a915_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Recruiter',
            fields=approval_fields() + [
                ('bbr_id', models.CharField(blank=True, max_length=20, null=True, unique=True)),
                ('company_name', models.CharField(max_length=200)),
                ('contact_name', models.CharField(max_length=150)),
                ('email', models.EmailField(max_length=255)),
                ('phone', models.CharField(blank=True, max_length=20)),
                ('website', models.URLField(blank=True, max_length=300)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='recruiter_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'recruiters',
                'ordering': ['-created_at'],
            },
        ),
    ]
