import django.db.models.deletion
import ts.apps.common.datetimeproxy
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('trips', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='InviteLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('token', models.CharField(max_length=32, unique=True)),
                ('created_datetime', models.DateTimeField(default=ts.apps.common.datetimeproxy.now)),
                ('expires_datetime', models.DateTimeField(blank=True, null=True)),
                ('usage_count', models.PositiveIntegerField(default=0)),
                ('max_uses', models.PositiveIntegerField(blank=True, null=True)),
                ('included_location_ids', models.JSONField(blank=True, null=True)),
                ('included_item_ids', models.JSONField(blank=True, null=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='invite_links_created', to=settings.AUTH_USER_MODEL)),
                ('trip', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='invite_links', to='trips.trip')),
            ],
            options={
                'verbose_name': 'Invite Link',
                'verbose_name_plural': 'Invite Links',
                'ordering': ['-created_datetime', '-id'],
            },
        ),
    ]
