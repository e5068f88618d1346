import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Session",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("date", models.DateField()),
                ("time", models.CharField(max_length=5)),
                ("duration_minutes", models.PositiveIntegerField()),
                ("cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("payment_link", models.URLField(blank=True, max_length=500, null=True)),
                ("places", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="created_sessions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["date", "time"],
                "indexes": [models.Index(fields=["date"], name="session_date_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(places__gte=1), name="session_places_positive"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(duration_minutes__gt=0),
                        name="session_duration_positive",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("has_paid", models.BooleanField(default=False)),
                ("registered_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "session",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrations",
                        to="scheduling.session",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="registrations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["registered_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["session", "registered_at"],
                        name="registration_order_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("session", "user"), name="unique_registration_per_user"
                    )
                ],
            },
        ),
    ]
