from django.db import migrations


def seed_brand_counter(apps, schema_editor):
    LedgerRecord = apps.get_model("core", "LedgerRecord")
    LedgerRecord.objects.get_or_create(
        key="brand_count",
        defaults={"tag": "brand_count", "value": 0},
    )


class Migration(migrations.Migration):

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        # Registrations lock this row, so it must exist before the first one.
        migrations.RunPython(seed_brand_counter, migrations.RunPython.noop),
    ]
