from django.db import models


class State(models.Model):
    """Top level of the administrative hierarchy"""

    name = models.CharField(max_length=255, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "location_state"
        ordering = ["id"]

    def __str__(self):
        return self.name

    def to_json(self) -> dict:
        """Return a dict representation of the model"""
        return {"id": self.id, "name": self.name}
