import django.db.models.deletion
import ts.apps.common.model_fields
import ts.apps.members.enums
import ts.apps.trips.enums
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('trips', '0001_initial'),
        ('locations', '0001_initial'),
        ('itineraries', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='TripMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('permission_level', ts.apps.common.model_fields.LabeledEnumField(default='viewer', enum_class=ts.apps.trips.enums.TripPermissionLevel, max_length=32, verbose_name='Permission Level')),
                ('participation_status', ts.apps.common.model_fields.LabeledEnumField(default='invited', enum_class=ts.apps.members.enums.ParticipationStatus, max_length=32, verbose_name='Participation Status')),
                ('added_datetime', models.DateTimeField(auto_now_add=True)),
                ('responded_datetime', models.DateTimeField(blank=True, help_text='When the member confirmed or declined.', null=True)),
                ('added_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='trips_shared_by_me', to=settings.AUTH_USER_MODEL)),
                ('trip', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='trips.trip')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='trip_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Trip Member',
                'verbose_name_plural': 'Trip Members',
                'unique_together': {('trip', 'user')},
            },
        ),
        migrations.CreateModel(
            name='LocationParticipant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_datetime', models.DateTimeField(auto_now_add=True)),
                ('location', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='locations.location')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='location_participations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Location Participant',
                'verbose_name_plural': 'Location Participants',
            },
        ),
        migrations.CreateModel(
            name='ItineraryItemParticipant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_datetime', models.DateTimeField(auto_now_add=True)),
                ('itinerary_item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='itineraries.itineraryitem')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='itinerary_item_participations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Itinerary Item Participant',
                'verbose_name_plural': 'Itinerary Item Participants',
            },
        ),
        migrations.AddConstraint(
            model_name='locationparticipant',
            constraint=models.UniqueConstraint(fields=('location', 'user'), name='unique_location_participant'),
        ),
        migrations.AddConstraint(
            model_name='itineraryitemparticipant',
            constraint=models.UniqueConstraint(fields=('itinerary_item', 'user'), name='unique_itinerary_item_participant'),
        ),
    ]
