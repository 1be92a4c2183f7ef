import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="License",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("license_key", models.CharField(db_index=True, max_length=255)),
                ("product", models.CharField(db_index=True, max_length=255)),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("owner_email", models.EmailField(blank=True, default="", max_length=255)),
                ("owner_name", models.CharField(blank=True, default="", max_length=255)),
                ("is_activated", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "licenses",
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("action", models.CharField(choices=[("ADD", "Add"), ("DELETE", "Delete")], max_length=50)),
                ("license_key", models.CharField(db_index=True, max_length=255)),
                ("product", models.CharField(max_length=255)),
                ("changed_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("details", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "audit_log",
                "ordering": ["-changed_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="license",
            constraint=models.UniqueConstraint(fields=("license_key", "product"), name="uk_license_product"),
        ),
    ]
