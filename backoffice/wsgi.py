"""
WSGI config for the backoffice project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backoffice.settings")

application = get_wsgi_application()

from backoffice.utils.bo_logger import setup_logger  # pylint:disable=wrong-import-position

setup_logger()
