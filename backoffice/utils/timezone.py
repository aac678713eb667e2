import datetime
import pytz
from django.conf import settings

UTC = pytz.utc


def local_zone():
    """the zone admin timestamps are rendered in"""
    return pytz.timezone(settings.TIME_ZONE)


def as_utc(timestamp: datetime.datetime):
    """Return time in UTC"""
    return timestamp.astimezone(UTC) if timestamp.tzinfo else UTC.localize(timestamp)


def as_local(timestamp: datetime.datetime):
    """Return time in the configured local zone"""
    zone = local_zone()
    return timestamp.astimezone(zone) if timestamp.tzinfo else zone.localize(timestamp)


def local_time(*args):
    """converter for logging.Formatter, renders the current time in the local zone"""
    utc_dt = datetime.datetime.now(UTC)
    converted = utc_dt.astimezone(local_zone())
    return converted.timetuple()
