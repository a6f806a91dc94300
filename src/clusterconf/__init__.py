"""
clusterconf - Configuration schema and registry engine for cluster management

Provides typed, named configuration fields grouped into schemas for the
master server, slave agents and game instances of a cluster, a plugin
extension contract for contributing per-plugin namespaces, and validated
get/set access with JSON persistence.

Package Structure:
- core/config/: Field definitions, groups, schemas, instances and persistence
- core/utils/: Logging
- cli/: Command-line interface for listing, showing and setting fields
"""

__version__ = "0.1.0"
