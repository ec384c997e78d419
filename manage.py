#!/usr/bin/env python
"""
Entry point for the healthcare backend.  It sets the default settings
module to ``healthcare.settings`` and delegates to Django's management
command line utility.  ``runserver`` without an address listens on
``$PORT`` (8000 by default).
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the Django project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'healthcare.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    argv = list(sys.argv)
    if argv[1:] == ['runserver']:
        argv.append(os.getenv('PORT', '8000'))
    execute_from_command_line(argv)


if __name__ == '__main__':
    main()
