"""round trip of the product_packages migration"""

import os
import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")
django.setup()

from django.db import connection
from django.db.migrations.executor import MigrationExecutor

PACKAGES_MIGRATION = ("backoffice", "0002_create_product_packages")
BEFORE_PACKAGES = ("backoffice", "0001_initial")

pytestmark = pytest.mark.django_db(transaction=True)


def migrate_to(target):
    executor = MigrationExecutor(connection)
    executor.loader.build_graph()
    executor.migrate([target])
    return executor


def table_names():
    return connection.introspection.table_names()


@pytest.fixture
def at_latest():
    """put the schema back to the latest migration whatever the test did"""
    yield
    migrate_to(PACKAGES_MIGRATION)


def test_up_creates_table_with_only_an_id(at_latest):
    migrate_to(PACKAGES_MIGRATION)
    assert "product_packages" in table_names()

    with connection.cursor() as cursor:
        description = connection.introspection.get_table_description(cursor, "product_packages")
    assert [column.name for column in description] == ["id"]

    with connection.cursor() as cursor:
        constraints = connection.introspection.get_constraints(cursor, "product_packages")
    primary_keys = [c["columns"] for c in constraints.values() if c["primary_key"]]
    assert primary_keys == [["id"]]


def test_up_then_down_leaves_no_table(at_latest):
    migrate_to(BEFORE_PACKAGES)
    before = set(table_names())
    assert "product_packages" not in before

    migrate_to(PACKAGES_MIGRATION)
    assert "product_packages" in table_names()

    migrate_to(BEFORE_PACKAGES)
    assert set(table_names()) == before


def test_down_when_table_is_already_gone(at_latest):
    """teardown only drops the table when it exists"""
    executor = migrate_to(PACKAGES_MIGRATION)
    with connection.schema_editor() as schema_editor:
        schema_editor.execute(schema_editor.sql_delete_table % {"table": "product_packages"})
    assert "product_packages" not in table_names()

    executor.loader.build_graph()
    executor.migrate([BEFORE_PACKAGES])
    assert "product_packages" not in table_names()


def test_ids_auto_increment(at_latest):
    migrate_to(PACKAGES_MIGRATION)
    with connection.cursor() as cursor:
        cursor.execute("INSERT INTO product_packages DEFAULT VALUES")
        cursor.execute("INSERT INTO product_packages DEFAULT VALUES")
        cursor.execute("SELECT id FROM product_packages ORDER BY id")
        ids = [row[0] for row in cursor.fetchall()]
    assert len(ids) == 2
    assert ids[1] > ids[0]
