from django.db import models


class ProductPackage(models.Model):
    """A product package; only the identifier is stored"""

    id = models.AutoField(primary_key=True)

    class Meta:
        db_table = "product_packages"

    def __str__(self):
        return f"ProductPackage #{self.id}"

    def to_json(self) -> dict:
        """Return a dict representation of the model"""
        return {"id": self.id}
