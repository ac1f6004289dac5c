"""Contact form service.

Renders a contact form, validates submissions, persists valid contacts
and lists what has been stored.
"""

__version__ = "0.1.0"
