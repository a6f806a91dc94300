"""
Test suite for clusterconf.

Tests mirror the package layout:

- core/config/: schema lifecycle, values, plugins and persistence
- core/utils/: logging
- cli/: the config command-line interface
"""
