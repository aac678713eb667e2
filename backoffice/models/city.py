from django.db import models
from backoffice.models.state import State


class City(models.Model):
    """A city, belongs to exactly one state"""

    name = models.CharField(max_length=255)
    state = models.ForeignKey(State, on_delete=models.PROTECT, related_name="cities")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "location_city"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["state", "name"], name="unique_city_name_per_state"),
        ]

    def __str__(self):
        return f"{self.name} ({self.state.name})"

    def to_json(self) -> dict:
        """Return a dict representation of the model"""
        return {
            "id": self.id,
            "name": self.name,
            "state": {"id": self.state_id, "name": self.state.name},
        }
