from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('onboarding', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='merchant',
            name='average_rating',
            field=models.DecimalField(decimal_places=1, default=Decimal('0.0'), max_digits=2),
        ),
        migrations.AddField(
            model_name='merchant',
            name='total_ratings',
            field=models.PositiveIntegerField(default=0),
        ),
    ]
