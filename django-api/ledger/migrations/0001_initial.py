import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                (
                    "identity",
                    models.CharField(max_length=150, primary_key=True, serialize=False),
                ),
                ("balance", models.PositiveBigIntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name="Counter",
            fields=[
                (
                    "name",
                    models.CharField(max_length=32, primary_key=True, serialize=False),
                ),
                ("value", models.PositiveBigIntegerField(default=0)),
            ],
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.PositiveIntegerField(primary_key=True, serialize=False)),
                ("organizer", models.CharField(max_length=150)),
                ("total_tickets", models.PositiveIntegerField()),
                ("price", models.PositiveBigIntegerField()),
                ("tickets_remaining", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="event",
            constraint=models.CheckConstraint(
                condition=models.Q(tickets_remaining__lte=models.F("total_tickets")),
                name="event_remaining_within_total",
            ),
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.PositiveIntegerField(primary_key=True, serialize=False)),
                ("owner", models.CharField(db_index=True, max_length=150)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="ledger.event",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
