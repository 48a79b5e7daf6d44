from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WorldStateEntry",
            fields=[
                (
                    "key",
                    models.CharField(
                        help_text="World-state key (product id).",
                        max_length=255,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "value",
                    models.BinaryField(
                        help_text=(
                            "Canonical bytes written by the last committed "
                            "transaction."
                        ),
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="When the key was last written. Not part of the value.",
                    ),
                ),
            ],
            options={
                "db_table": "foodledger_world_state",
                "ordering": ["key"],
            },
        ),
    ]
