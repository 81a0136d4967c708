import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('onboarding', '0002_merchant_ratings'),
        ('transactions', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Rating',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('stars', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('review_text', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('merchant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ratings', to='onboarding.merchant')),
                ('student', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ratings', to='onboarding.student')),
                ('transaction', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='rating', to='transactions.transaction')),
            ],
            options={
                'db_table': 'ratings',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['merchant', 'created_at'], name='ratings_merchan_4d7e21_idx'),
                ],
            },
        ),
    ]
