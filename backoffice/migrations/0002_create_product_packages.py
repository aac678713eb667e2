from django.db import migrations, models

PRODUCT_PACKAGES_TABLE = "product_packages"


def create_product_packages(apps, schema_editor):
    """create the product_packages table, an auto-increment id and nothing else"""
    ProductPackage = apps.get_model("backoffice", "ProductPackage")
    schema_editor.create_model(ProductPackage)


def drop_product_packages(apps, schema_editor):
    """drop the product_packages table if it is there"""
    existing_tables = schema_editor.connection.introspection.table_names()
    if PRODUCT_PACKAGES_TABLE not in existing_tables:
        return
    ProductPackage = apps.get_model("backoffice", "ProductPackage")
    schema_editor.delete_model(ProductPackage)


class Migration(migrations.Migration):
    dependencies = [
        ("backoffice", "0001_initial"),
    ]

    operations = [
        migrations.SeparateDatabaseAndState(
            state_operations=[
                migrations.CreateModel(
                    name="ProductPackage",
                    fields=[
                        ("id", models.AutoField(primary_key=True, serialize=False)),
                    ],
                    options={
                        "db_table": PRODUCT_PACKAGES_TABLE,
                    },
                ),
            ],
        ),
        migrations.RunPython(create_product_packages, reverse_code=drop_product_packages),
    ]
