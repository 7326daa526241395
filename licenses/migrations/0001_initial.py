from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                ("key", models.CharField(max_length=100, primary_key=True, serialize=False)),
                (
                    "license_type",
                    models.CharField(
                        choices=[("lifetime", "Lifetime"), ("yearly", "Yearly")],
                        max_length=20,
                    ),
                ),
                ("bound", models.BooleanField(db_index=True, default=False)),
                (
                    "bound_domain",
                    models.CharField(
                        blank=True,
                        help_text="Domain the license is bound to",
                        max_length=255,
                        null=True,
                    ),
                ),
                ("bound_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("bound", False), ("bound_domain__isnull", True)),
                            models.Q(("bound", True), ("bound_domain__isnull", False)),
                            _connector="OR",
                        ),
                        name="license_binding_consistent",
                    )
                ],
            },
        ),
    ]
