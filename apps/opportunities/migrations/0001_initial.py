import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('onboarding', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OpportunityCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('icon', models.CharField(blank=True, max_length=50)),
                ('description', models.CharField(blank=True, max_length=300)),
                ('display_order', models.PositiveSmallIntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'db_table': 'opportunity_categories',
                'ordering': ['display_order', 'name'],
                'verbose_name_plural': 'opportunity categories',
            },
        ),
        migrations.CreateModel(
            name='Opportunity',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField()),
                ('type', models.CharField(choices=[('freelance', 'Freelance'), ('internship', 'Internship'), ('part_time', 'Part-time'), ('full_time', 'Full-time'), ('contract', 'Contract')], max_length=20)),
                ('work_mode', models.CharField(choices=[('remote', 'Remote'), ('onsite', 'On-site'), ('hybrid', 'Hybrid')], max_length=20)),
                ('experience_level', models.CharField(choices=[('beginner', 'Beginner'), ('intermediate', 'Intermediate'), ('expert', 'Expert'), ('any', 'Any')], default='any', max_length=20)),
                ('compensation', models.CharField(blank=True, max_length=100)),
                ('compensation_type', models.CharField(choices=[('paid', 'Paid'), ('unpaid', 'Unpaid'), ('stipend', 'Stipend'), ('commission', 'Commission')], default='paid', max_length=20)),
                ('skills_required', models.JSONField(blank=True, default=list)),
                ('vacancies', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('duration', models.CharField(blank=True, max_length=100)),
                ('terms', models.TextField(blank=True)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('is_pan_india', models.BooleanField(default=False)),
                ('apply_method', models.CharField(choices=[('in_app', 'In app'), ('whatsapp', 'WhatsApp'), ('email', 'Email'), ('external', 'External link')], default='in_app', max_length=20)),
                ('apply_link', models.CharField(blank=True, max_length=500)),
                ('status', models.CharField(choices=[('pending_review', 'Pending review'), ('active', 'Active'), ('paused', 'Paused'), ('closed', 'Closed'), ('rejected', 'Rejected')], db_index=True, default='pending_review', max_length=20)),
                ('rejection_reason', models.TextField(blank=True)),
                ('total_applications', models.PositiveIntegerField(default=0)),
                ('expires_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='opportunities', to='opportunities.opportunitycategory')),
                ('recruiter', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='opportunities', to='onboarding.recruiter')),
            ],
            options={
                'db_table': 'opportunities',
                'ordering': ['-created_at'],
                'verbose_name_plural': 'opportunities',
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='opportuniti_status_2f9c18_idx'),
                    models.Index(fields=['recruiter', 'status'], name='opportuniti_recruit_7a4e05_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OpportunityApplication',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('cover_note', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('applied', 'Applied'), ('viewed', 'Viewed'), ('shortlisted', 'Shortlisted'), ('hired', 'Hired'), ('rejected', 'Rejected')], default='applied', max_length=20)),
                ('recruiter_notes', models.TextField(blank=True)),
                ('applied_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('opportunity', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applications', to='opportunities.opportunity')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='opportunity_applications', to='onboarding.student')),
            ],
            options={
                'db_table': 'opportunity_applications',
                'ordering': ['-applied_at'],
                'unique_together': {('opportunity', 'student')},
                'indexes': [
                    models.Index(fields=['opportunity', 'status'], name='opportunity_opportu_5b1d63_idx'),
                ],
            },
        ),
    ]
