from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='VisitCounter',
            fields=[
                ('key', models.CharField(help_text='Unique counter name, e.g. site_visits', max_length=100, primary_key=True, serialize=False)),
                ('count', models.PositiveBigIntegerField(default=0, help_text='Number of recorded events')),
            ],
            options={
                'verbose_name': 'Visit Counter',
                'verbose_name_plural': 'Visit Counters',
                'db_table': 'analytics_visit_counters',
            },
        ),
    ]
