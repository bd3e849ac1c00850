"""
Licenses module - License records and license status.

This module handles:
- License key format validation
- Version compatibility ranges
- The shared license file
- License status derivation
"""
