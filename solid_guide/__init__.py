"""
SOLID principles guide package.
Exposes main interfaces and factory functions for easy usage.
"""

# Core interfaces
from .interfaces import (
    DemoResult,
    Demonstration,
    ReportTransformer,
    StorageProvider,
    ConfigurationProvider,
    Logger
)

# Configuration management
from .config import ConfigurationManager, GuideConfiguration

# Catalog and demonstrations
from .catalog import Catalog, Topic, load_catalog
from .demonstrations import DemonstrationRegistry, default_registry

# Main service container
from .container import get_container, get_service_builder

# Factory classes for easy instantiation
from .storage import StorageFactory
from .logging import LoggerFactory

__version__ = "0.1.0"

__all__ = [
    # Interfaces
    'DemoResult',
    'Demonstration',
    'ReportTransformer',
    'StorageProvider',
    'ConfigurationProvider',
    'Logger',

    # Configuration
    'ConfigurationManager',
    'GuideConfiguration',

    # Catalog and demonstrations
    'Catalog',
    'Topic',
    'load_catalog',
    'DemonstrationRegistry',
    'default_registry',

    # Container and builders
    'get_container',
    'get_service_builder',

    # Factories
    'StorageFactory',
    'LoggerFactory'
]
