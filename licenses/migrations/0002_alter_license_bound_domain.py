from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("licenses", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="license",
            name="bound_domain",
            field=models.TextField(
                blank=True, help_text="Domain the license is bound to", null=True
            ),
        ),
    ]
