"""View drivers and connections.

Hosts look a driver up by name, connect it with a config and call ``parse``
on the returned connection for every render request::

    connection = get_driver("default").connect({"root": "asset/views"})
    html = connection.parse(ViewRequest(view="home", language="en"))

The default driver holds no persistent resources, so ``open``, ``close``
and ``health`` are no-ops.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from gofr_view.config import ViewConfig
from gofr_view.exceptions import DriverNotFoundError
from gofr_view.logger import DefaultLogger, Logger
from gofr_view.models.view import ConnectionHealth, ViewRequest
from gofr_view.rendering import TemplateEngine, ViewPipeline
from gofr_view.storage import TemplateStorageBase

DEFAULT_DRIVER = "default"

ConfigSource = Union[ViewConfig, Mapping[str, Any], None]


class ViewConnection:
    """A configured view engine; one per host connection."""

    def __init__(
        self,
        config: ViewConfig,
        logger: Optional[Logger] = None,
        storage: Optional[TemplateStorageBase] = None,
    ) -> None:
        self.config = config
        self.logger = logger or DefaultLogger()
        # Built once; every parse() clones it per session
        self.engine = TemplateEngine.from_config(config)
        self.pipeline = ViewPipeline(
            config, logger=self.logger, engine=self.engine, storage=storage
        )

    def open(self) -> None:
        return None

    def close(self) -> None:
        return None

    def health(self) -> ConnectionHealth:
        return ConnectionHealth(workload=0)

    def parse(self, request: ViewRequest) -> str:
        return self.pipeline.parse(request)


class DefaultViewDriver:
    """Driver producing ViewConnections over the local filesystem."""

    def __init__(self, storage: Optional[TemplateStorageBase] = None) -> None:
        self.storage = storage

    def connect(self, config: ConfigSource = None, logger: Optional[Logger] = None) -> ViewConnection:
        """
        Create a connection, filling unset config values with defaults.

        Args:
            config: ViewConfig, settings mapping, or None for all defaults
            logger: Logger instance

        Returns:
            ViewConnection ready to parse requests
        """
        if not isinstance(config, ViewConfig):
            config = ViewConfig.from_mapping(config)
        connection = ViewConnection(config, logger=logger, storage=self.storage)
        connection.logger.debug(
            "View connection created", root=config.root, shared=config.shared,
            left=config.left, right=config.right,
        )
        return connection


_drivers: Dict[str, DefaultViewDriver] = {}


def register_driver(name: str, driver: DefaultViewDriver) -> None:
    """Register a driver under a name, replacing any previous registration."""
    _drivers[name] = driver


def get_driver(name: str = DEFAULT_DRIVER) -> DefaultViewDriver:
    """
    Look up a registered driver.

    Raises:
        DriverNotFoundError: If no driver is registered under the name
    """
    driver = _drivers.get(name)
    if driver is None:
        raise DriverNotFoundError(name, available=list_drivers())
    return driver


def list_drivers() -> List[str]:
    return sorted(_drivers)


register_driver(DEFAULT_DRIVER, DefaultViewDriver())
