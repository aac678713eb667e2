from django.db import models
from django.db.models import Exists, OuterRef
from backoffice.models.city import City


class DistrictQuerySet(models.QuerySet):
    """queries used by the district grid"""

    def with_has_district(self):
        """annotate each row with has_district: True when it has nested districts"""
        children = District.objects.filter(parent=OuterRef("pk"))
        return self.annotate(has_district=Exists(children))

    def for_grid(self):
        """city and state joined in, has_district annotated"""
        return self.select_related("city__state").with_has_district()

    def roots(self):
        """districts that are not nested under another district"""
        return self.filter(parent__isnull=True)


class District(models.Model):
    """A district of a city; districts may nest under a parent district"""

    name = models.CharField(max_length=255)
    city = models.ForeignKey(City, on_delete=models.PROTECT, related_name="districts")
    parent = models.ForeignKey(
        "self", on_delete=models.CASCADE, null=True, blank=True, related_name="children"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = DistrictQuerySet.as_manager()

    class Meta:
        db_table = "location_district"
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.city.name})"

    def to_json(self) -> dict:
        """Return a dict representation of the model"""
        return {
            "id": self.id,
            "name": self.name,
            "city_id": self.city_id,
            "parent_id": self.parent_id,
        }
