"""
Seed the state / city / district hierarchy from a json document

{"states": [{"name": "...", "cities": [{"name": "...", "districts": [
    {"name": "...", "districts": [...]}
]}]}]}
"""

import json
from pathlib import Path
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.models.district import District


class Command(BaseCommand):
    help = "Seed states, cities and districts from a json file"

    def add_arguments(self, parser):
        parser.add_argument("file", type=str, help="Path to the json document")
        parser.add_argument(
            "--validate-only", action="store_true", help="Only validate, don't seed"
        )

    def handle(self, *args, **options):
        document = self.load_document(Path(options["file"]))

        errors = self.validate_document(document)
        if errors:
            for error in errors:
                self.stdout.write(self.style.ERROR(f"  • {error}"))
            raise CommandError("Validation failed! Fix errors before seeding.")

        if options["validate_only"]:
            self.stdout.write(self.style.SUCCESS("All validations passed"))
            return

        with transaction.atomic():
            counts = self.seed(document)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {counts['states']} states, {counts['cities']} cities, "
                f"{counts['districts']} districts"
            )
        )

    def load_document(self, path: Path) -> dict:
        """read and parse the json file"""
        if not path.exists():
            raise CommandError(f"{path} not found")
        try:
            with open(path, "r", encoding="utf-8") as json_file:
                return json.load(json_file)
        except json.JSONDecodeError as err:
            raise CommandError(f"{path} is not valid json: {err}") from err

    def validate_document(self, document) -> list:
        """every level needs a non-empty name, names are unique among siblings"""
        errors = []
        if not isinstance(document, dict) or not isinstance(document.get("states"), list):
            return ["document must be an object with a 'states' list"]

        self._validate_level(document["states"], "states", "cities", errors)
        for state in document["states"]:
            if not isinstance(state, dict):
                continue
            cities = state.get("cities", [])
            if not isinstance(cities, list):
                continue
            for city in cities:
                if isinstance(city, dict):
                    self._validate_districts(
                        city.get("districts", []), f"{state.get('name')}/{city.get('name')}", errors
                    )
        return errors

    def _validate_level(self, entries, where: str, child_key: str, errors: list):
        names = set()
        for entry in entries:
            if (
                not isinstance(entry, dict)
                or not isinstance(entry.get("name"), str)
                or not entry["name"].strip()
            ):
                errors.append(f"{where}: every entry needs a name")
                continue
            name = entry["name"].strip()
            if name in names:
                errors.append(f"{where}: duplicate name {name}")
            names.add(name)
            children = entry.get(child_key, [])
            if not isinstance(children, list):
                errors.append(f"{where}/{name}: '{child_key}' must be a list")
            elif child_key == "cities":
                self._validate_level(children, f"{where}/{name}", "districts", errors)

    def _validate_districts(self, districts, where: str, errors: list):
        if not isinstance(districts, list):
            return
        for district in districts:
            if (
                not isinstance(district, dict)
                or not isinstance(district.get("name"), str)
                or not district["name"].strip()
            ):
                errors.append(f"{where}: every district needs a name")
                continue
            nested = district.get("districts", [])
            if not isinstance(nested, list):
                errors.append(f"{where}/{district['name']}: 'districts' must be a list")
                continue
            self._validate_districts(nested, f"{where}/{district['name']}", errors)

    def seed(self, document: dict) -> dict:
        """upsert by name, existing rows are reused"""
        counts = {"states": 0, "cities": 0, "districts": 0}
        for state_entry in document["states"]:
            state, created = State.objects.get_or_create(name=state_entry["name"].strip())
            counts["states"] += int(created)
            for city_entry in state_entry.get("cities", []):
                city, created = City.objects.get_or_create(
                    state=state, name=city_entry["name"].strip()
                )
                counts["cities"] += int(created)
                counts["districts"] += self.seed_districts(
                    city, None, city_entry.get("districts", [])
                )
        return counts

    def seed_districts(self, city: City, parent, entries: list) -> int:
        """create the districts of one level and recurse into their nested districts"""
        created_count = 0
        for entry in entries:
            district, created = District.objects.get_or_create(
                city=city, parent=parent, name=entry["name"].strip()
            )
            created_count += int(created)
            created_count += self.seed_districts(city, district, entry.get("districts", []))
        return created_count
