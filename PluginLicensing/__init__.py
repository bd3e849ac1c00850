"""
Plugin Licensing Django project.
"""
