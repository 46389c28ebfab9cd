from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('academics', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.AddField(
            model_name='subject',
            name='faculty',
            field=models.ManyToManyField(blank=True, limit_choices_to={'role': 'faculty'}, related_name='subjects_taught', to=settings.AUTH_USER_MODEL),
        ),
    ]
