from django import forms
from backoffice.models.city import City
from backoffice.models.district import District


class DistrictForm(forms.ModelForm):
    """create / edit form for a district"""

    class Meta:
        model = District
        fields = ["name", "city", "parent"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["city"].queryset = City.objects.select_related("state").order_by("name")
        parents = District.objects.select_related("city").order_by("name")
        if self.instance.pk:
            parents = parents.exclude(pk=self.instance.pk)
        self.fields["parent"].queryset = parents
        self.fields["parent"].required = False

    def clean(self):
        cleaned_data = super().clean()
        city = cleaned_data.get("city")
        parent = cleaned_data.get("parent")
        if (
            self.instance.pk
            and city is not None
            and city.id != self.instance.city_id
            and self.instance.children.exists()
        ):
            self.add_error("city", "a district with nested districts cannot move to another city")
            return cleaned_data

        if city is None or parent is None:
            return cleaned_data

        if parent.city_id != city.id:
            self.add_error("parent", "parent district must belong to the same city")
            return cleaned_data

        if self.instance.pk:
            ancestor = parent
            while ancestor is not None:
                if ancestor.pk == self.instance.pk:
                    self.add_error("parent", "a district cannot be nested under itself")
                    break
                ancestor = ancestor.parent
        return cleaned_data


class CityForm(forms.ModelForm):
    """edit form for a city"""

    class Meta:
        model = City
        fields = ["name", "state"]
