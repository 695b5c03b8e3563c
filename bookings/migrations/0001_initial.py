import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='BookingRequest',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('session_id_snapshot', models.PositiveBigIntegerField()),
                ('session_title', models.CharField(blank=True, max_length=200)),
                ('session_date_time', models.DateTimeField(blank=True, null=True)),
                ('session_location', models.CharField(blank=True, max_length=255)),
                ('session_cover_image_url', models.CharField(blank=True, max_length=500)),
                ('learner_name', models.CharField(blank=True, max_length=150)),
                ('teacher_name', models.CharField(blank=True, max_length=150)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('rejected', 'Rejected'), ('cancelled_by_learner', 'Cancelled by learner'), ('cancelled_by_teacher', 'Cancelled by teacher'), ('completed', 'Completed')], default='pending', max_length=25)),
                ('requested_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('learner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='booking_requests', to=settings.AUTH_USER_MODEL)),
                ('session', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='booking_requests', to='catalog.session')),
                ('teacher', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='received_booking_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-requested_at', '-id'],
                'indexes': [
                    models.Index(fields=['session', 'status'], name='bookings_bo_session_7d1c2e_idx'),
                    models.Index(fields=['learner', 'session'], name='bookings_bo_learner_3f9a41_idx'),
                ],
            },
        ),
    ]
