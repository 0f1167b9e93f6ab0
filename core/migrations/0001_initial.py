from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="LedgerRecord",
            fields=[
                ("key", models.CharField(max_length=400, primary_key=True, serialize=False)),
                ("tag", models.CharField(db_index=True, max_length=20)),
                ("value", models.JSONField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "ledger_records",
                "ordering": ["key"],
            },
        ),
        migrations.CreateModel(
            name="RetentionLease",
            fields=[
                ("scope", models.CharField(max_length=50, primary_key=True, serialize=False)),
                ("expires_at", models.DateTimeField()),
                ("extended_at", models.DateTimeField()),
            ],
            options={
                "db_table": "retention_leases",
            },
        ),
    ]
