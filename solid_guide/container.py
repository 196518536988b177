"""
Dependency injection container following SOLID principles.
Implements Dependency Inversion Principle by managing dependencies centrally.
"""
from typing import Dict, Any, List, Optional, TypeVar, Type, Callable

from .catalog import Catalog, load_catalog
from .config import ConfigurationManager, EnvironmentConfigProvider, GuideConfiguration
from .demonstrations import DemonstrationRegistry, default_registry
from .errors import ServiceNotRegisteredError
from .interfaces import ConfigurationProvider, DemoResult, Logger
from .logging import LoggerFactory
from .storage import LocalFileStorage, StorageFactory
from .transformers import JSONReportTransformer, MarkdownGuideTransformer

T = TypeVar('T')


class DIContainer:
    """Dependency injection container for managing guide dependencies"""

    def __init__(self, config_provider: Optional[ConfigurationProvider] = None):
        self._factories: Dict[str, Callable] = {}
        self._singletons: Dict[str, Any] = {}
        self._config_provider = config_provider or EnvironmentConfigProvider()

        self._register_default_factories()

    def register_singleton(self, service_type: Type[T], instance: T) -> None:
        """Register a singleton instance"""
        self._singletons[service_type.__name__] = instance

    def register_factory(self, service_type: Type[T], factory: Callable[..., T]) -> None:
        """Register a factory function for creating instances"""
        self._factories[service_type.__name__] = factory

    def get(self, service_type: Type[T]) -> T:
        """Get an instance of the requested service type"""
        key = service_type.__name__

        if key in self._singletons:
            return self._singletons[key]

        if key in self._factories:
            return self._factories[key]()

        raise ServiceNotRegisteredError(f"Service {key} not registered")

    def get_config_manager(self) -> ConfigurationManager:
        return ConfigurationManager(self._config_provider)

    def get_guide_config(self, output_dir: Optional[str] = None) -> GuideConfiguration:
        return self.get_config_manager().get_guide_config(output_dir)

    def get_logger(self, name: str = "solid_guide", logger_type: Optional[str] = None) -> Logger:
        """Get a logger instance, defaulting to the configured type"""
        config = self.get_guide_config()
        return LoggerFactory.create(logger_type or config.logger_type, name, config.log_level)

    def get_catalog(self, path: Optional[str] = None) -> Catalog:
        return load_catalog(path or self.get_guide_config().catalog_path)

    def get_registry(self, logger: Optional[Logger] = None) -> DemonstrationRegistry:
        return default_registry(logger or self.get_logger())

    def get_guide_transformer(self, topic_code: str, catalog: Optional[Catalog] = None,
                              logger: Optional[Logger] = None) -> MarkdownGuideTransformer:
        """Get Markdown transformer for a catalog topic"""
        if catalog is None:
            catalog = self.get_catalog()
        topic = catalog.get(topic_code)
        if topic is None:
            raise ValueError(f"Unknown topic: {topic_code}")
        return MarkdownGuideTransformer(topic, logger or self.get_logger())

    def get_json_transformer(self, logger: Optional[Logger] = None) -> JSONReportTransformer:
        return JSONReportTransformer(logger or self.get_logger())

    def get_local_storage(self, base_path: Optional[str] = None,
                          logger: Optional[Logger] = None) -> LocalFileStorage:
        """Get local file storage instance"""
        base_path = base_path or self.get_guide_config().output_dir
        return StorageFactory.create_local_storage(base_path, logger or self.get_logger())

    def _register_default_factories(self) -> None:
        self.register_factory(ConfigurationManager, self.get_config_manager)
        self.register_factory(GuideConfiguration, self.get_guide_config)
        self.register_factory(DemonstrationRegistry, self.get_registry)
        self.register_factory(Catalog, self.get_catalog)


class ServiceBuilder:
    """Builder class for constructing common service combinations"""

    def __init__(self, container: DIContainer):
        self.container = container
        self.logger = container.get_logger()

    def build_walkthrough(self, output_dir: Optional[str] = None) -> Dict[str, Any]:
        """Build the services needed to run demonstrations and publish guides"""
        return {
            'catalog': self.container.get_catalog(),
            'registry': self.container.get_registry(self.logger),
            'storage': self.container.get_local_storage(output_dir, self.logger),
            'json_transformer': self.container.get_json_transformer(self.logger)
        }

    def render_guide(self, topic_code: str, results: List[DemoResult],
                     catalog: Optional[Catalog] = None) -> str:
        transformer = self.container.get_guide_transformer(topic_code, catalog, self.logger)
        return transformer.transform(results)


# Global container instance
_container = DIContainer()


def get_container() -> DIContainer:
    """Get the global container instance"""
    return _container


def get_service_builder() -> ServiceBuilder:
    """Get a service builder instance"""
    return ServiceBuilder(get_container())
