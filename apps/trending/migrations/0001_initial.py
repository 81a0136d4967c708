import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('offers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CurationState',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('version', models.PositiveIntegerField(default=0)),
                ('published_at', models.DateTimeField(blank=True, null=True)),
                ('published_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'trending_curation_state',
            },
        ),
        migrations.CreateModel(
            name='TrendingEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('section', models.CharField(choices=[('online', 'Online'), ('offline', 'Offline')], max_length=10)),
                ('position', models.PositiveIntegerField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('offer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='trending_entries', to='offers.offer')),
                ('online_offer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='trending_entries', to='offers.onlineoffer')),
            ],
            options={
                'db_table': 'trending_offers',
                'ordering': ['section', 'position'],
                'constraints': [
                    models.UniqueConstraint(fields=('section', 'position'), name='trending_section_position_uniq'),
                    models.UniqueConstraint(condition=models.Q(('offer__isnull', False)), fields=('section', 'offer'), name='trending_unique_offer'),
                    models.UniqueConstraint(condition=models.Q(('online_offer__isnull', False)), fields=('section', 'online_offer'), name='trending_unique_online_offer'),
                    models.CheckConstraint(condition=models.Q(models.Q(('section', 'offline'), ('offer__isnull', False), ('online_offer__isnull', True)), models.Q(('section', 'online'), ('online_offer__isnull', False), ('offer__isnull', True)), _connector='OR'), name='trending_offer_matches_section'),
                ],
            },
        ),
    ]
