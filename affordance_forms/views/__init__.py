"""View rendering module for HTML forms.

This module handles the template loading and form rendering, separate from the
web routers. Views turn a resource's primary affordance into HTML bytes.
"""
