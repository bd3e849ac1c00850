"""
Activations module - License activation against the licensing authority.

This module handles:
- Exchanging email and order ID for a license key
- Validating the returned license against the installed plugin
- Persisting the activated license
"""
