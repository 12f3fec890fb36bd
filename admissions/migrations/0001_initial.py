import django.core.validators
import django.utils.timezone
import phonenumber_field.modelfields
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Application',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('full_name', models.CharField(help_text="Applicant's full name", max_length=150)),
                ('email', models.EmailField(help_text="Applicant's email address", max_length=255, validators=[django.core.validators.EmailValidator()])),
                ('phone', phonenumber_field.modelfields.PhoneNumberField(help_text="Applicant's contact number", max_length=128, region=None)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('address', models.TextField(blank=True, default='')),
                ('course', models.CharField(db_index=True, help_text='Course or programme applied for', max_length=150)),
                ('qualification', models.CharField(help_text='Highest qualification held', max_length=255)),
                ('message', models.TextField(blank=True, default='', help_text='Anything else the applicant wants to tell us')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('under_review', 'Under Review'), ('accepted', 'Accepted'), ('rejected', 'Rejected')], db_index=True, default='pending', max_length=20)),
                ('submitted_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Application',
                'verbose_name_plural': 'Applications',
                'db_table': 'admission_applications',
                'ordering': ['-submitted_at'],
                'indexes': [
                    models.Index(fields=['status', 'submitted_at'], name='admission_status_sub_idx'),
                    models.Index(fields=['email'], name='admission_email_idx'),
                ],
            },
        ),
    ]
