import django.core.validators
import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Enquiry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='Name of the person making the enquiry', max_length=100)),
                ('email', models.EmailField(help_text='Email address for follow-up', max_length=255, validators=[django.core.validators.EmailValidator()])),
                ('subject', models.CharField(help_text='Subject line entered on the form', max_length=200)),
                ('message', models.TextField(help_text='The enquiry text')),
                ('submitted_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, help_text='When the enquiry was submitted')),
            ],
            options={
                'verbose_name': 'Enquiry',
                'verbose_name_plural': 'Enquiries',
                'db_table': 'contact_enquiries',
                'ordering': ['-submitted_at'],
                'indexes': [models.Index(fields=['email'], name='contact_enquiry_email_idx')],
            },
        ),
    ]
