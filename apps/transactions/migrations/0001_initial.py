import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('onboarding', '0001_initial'),
        ('offers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('student_bb_id', models.CharField(max_length=20)),
                ('student_name', models.CharField(max_length=150)),
                ('merchant_bbm_id', models.CharField(max_length=20)),
                ('merchant_name', models.CharField(max_length=200)),
                ('offer_title', models.CharField(max_length=200)),
                ('original_amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('discount_amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('final_amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('payment_method', models.CharField(choices=[('cash', 'Cash'), ('online', 'Online')], default='cash', max_length=10)),
                ('status', models.CharField(choices=[('completed', 'Completed'), ('cancelled', 'Cancelled'), ('failed', 'Failed')], default='completed', max_length=20)),
                ('scanned_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('merchant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transactions', to='onboarding.merchant')),
                ('offer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transactions', to='offers.offer')),
                ('scanned_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='scanned_transactions', to=settings.AUTH_USER_MODEL)),
                ('student', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transactions', to='onboarding.student')),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-scanned_at'],
                'indexes': [
                    models.Index(fields=['merchant', 'scanned_at'], name='transaction_merchan_51a0c2_idx'),
                    models.Index(fields=['student', 'scanned_at'], name='transaction_student_0e7b94_idx'),
                    models.Index(fields=['student', 'offer', 'status'], name='transaction_student_c3d815_idx'),
                ],
            },
        ),
    ]
